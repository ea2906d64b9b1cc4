"""Base class and protocol for pool quote handlers."""

from __future__ import annotations

from typing import Protocol

from gnomo.amm.base import TokenSide
from gnomo.pools import AnyPool
from gnomo.routing.types import Quote


class PoolHandler(Protocol):
    """Protocol for pool-specific quote handlers.

    Each handler quotes one pool kind and reports degenerate results
    (empty pool, zero or unreliable output) as None.
    """

    def quote(self, pool: AnyPool, denom_in: str, amount_in: int) -> Quote | None:
        """Quote selling amount_in of denom_in through pool.

        Args:
            pool: The pool to quote (type must match handler)
            denom_in: Denom being sold; must be one of the pool's denoms
            amount_in: Input amount

        Returns:
            Quote with a strictly positive output, or None
        """
        ...


class BaseHandler:
    """Shared handler utilities."""

    def _build_quote(
        self,
        pool: AnyPool,
        token_in: TokenSide,
        amount_in: int,
        amount_out: int | None,
    ) -> Quote | None:
        """Wrap a calculator result, dropping unavailable or zero outputs."""
        if amount_out is None or amount_out <= 0:
            return None
        return Quote(
            pool_kind=pool.kind,
            pool=pool,
            token_in=token_in,
            amount_in=amount_in,
            amount_out=amount_out,
        )


__all__ = ["PoolHandler", "BaseHandler"]
