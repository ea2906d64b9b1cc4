"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass

from gnomo.amm.base import PoolKind, TokenSide
from gnomo.pools import AnyPool


@dataclass(frozen=True)
class Quote:
    """Expected output of a trade through one pool.

    Ephemeral: recomputed on every input change and never persisted.
    """

    pool_kind: PoolKind
    pool: AnyPool
    token_in: TokenSide
    amount_in: int
    amount_out: int

    @property
    def pool_id(self) -> int:
        return self.pool.id

    @property
    def fee_bps(self) -> int:
        return self.pool.fee_bps

    @property
    def denom_in(self) -> str:
        return self.pool.denom_a if self.token_in == "A" else self.pool.denom_b

    @property
    def denom_out(self) -> str:
        return self.pool.denom_out(self.token_in)


__all__ = ["Quote"]
