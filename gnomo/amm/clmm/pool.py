"""CLMM pool and position snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from gnomo.amm.base import PoolKind, TokenSide
from gnomo.constants import BPS_DENOMINATOR, PRICE_SCALE
from gnomo.math.ticks import price_x6_to_tick


@dataclass(frozen=True)
class CLMMPool:
    """Snapshot of a concentrated liquidity pool.

    Price is B per A on the 1e6 fixed-point scale. Only the liquidity active
    at the current tick is known; per-tick liquidity changes are not part of
    the snapshot, which is why quotes are single-range estimates.
    """

    id: int
    denom_a: str
    denom_b: str
    price_x6: int  # Current price * 1e6
    current_tick: int
    liquidity: int  # Active liquidity at current_tick
    fee_bps: int = 30
    tick_spacing: int = 10

    kind = PoolKind.CLMM

    def __post_init__(self) -> None:
        if not 0 <= self.fee_bps <= BPS_DENOMINATOR:
            raise ValueError(f"fee_bps must be in [0, {BPS_DENOMINATOR}], got {self.fee_bps}")
        if self.tick_spacing <= 0:
            raise ValueError(f"Pool {self.id}: tick_spacing must be positive")
        if self.liquidity < 0 or self.price_x6 < 0:
            raise ValueError(f"Pool {self.id} has negative liquidity or price")
        # current_tick must round from price_x6, within one tick
        if self.price_x6 > 0:
            implied = price_x6_to_tick(self.price_x6)
            if abs(implied - self.current_tick) > 1:
                raise ValueError(
                    f"Pool {self.id}: current_tick {self.current_tick} does not match "
                    f"price_x6 {self.price_x6} (tick {implied})"
                )

    @property
    def price(self) -> float:
        """Current price as a float (B per A)."""
        return self.price_x6 / PRICE_SCALE

    @property
    def is_empty(self) -> bool:
        return self.liquidity == 0 or self.price_x6 == 0

    def side_of(self, denom: str) -> TokenSide:
        """Which side of the pool holds denom."""
        if denom == self.denom_a:
            return "A"
        if denom == self.denom_b:
            return "B"
        raise ValueError(f"Denom {denom} not in pool {self.id}")

    def denom_out(self, token_in: TokenSide) -> str:
        return self.denom_b if token_in == "A" else self.denom_a


@dataclass(frozen=True)
class CLMMPosition:
    """Liquidity provided to a CLMM pool over [tick_lower, tick_upper)."""

    id: int
    pool_id: int
    owner: str
    tick_lower: int
    tick_upper: int
    liquidity: int


__all__ = ["CLMMPool", "CLMMPosition"]
