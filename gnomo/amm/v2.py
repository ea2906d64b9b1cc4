"""Constant-product (V2) pool math.

V2 pools hold two reserves and price trades with x * y = k. The fee is
deducted from the input before the exchange:

    amount_in_after_fee = amount_in * (10000 - fee_bps) // 10000
    amount_out = reserve_out * amount_in_after_fee // (reserve_in + amount_in_after_fee)

All arithmetic is integer, in each token's smallest unit.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from gnomo.amm.base import PoolKind, TokenSide
from gnomo.constants import BPS_DENOMINATOR
from gnomo.safe_int import S

logger = structlog.get_logger()


@dataclass(frozen=True)
class V2Pool:
    """Snapshot of a constant-product pool."""

    id: int
    denom_a: str
    denom_b: str
    reserve_a: int
    reserve_b: int
    total_lp: int
    # Fee in basis points (30 = 0.3%)
    fee_bps: int = 30

    kind = PoolKind.V2

    def __post_init__(self) -> None:
        if not 0 <= self.fee_bps <= BPS_DENOMINATOR:
            raise ValueError(f"fee_bps must be in [0, {BPS_DENOMINATOR}], got {self.fee_bps}")
        if self.reserve_a < 0 or self.reserve_b < 0 or self.total_lp < 0:
            raise ValueError(f"Pool {self.id} has negative reserves or LP supply")
        if (self.total_lp == 0) != (self.reserve_a == 0 and self.reserve_b == 0):
            raise ValueError(f"Pool {self.id}: LP supply must be zero iff both reserves are zero")

    @property
    def is_empty(self) -> bool:
        return self.reserve_a == 0 or self.reserve_b == 0

    def side_of(self, denom: str) -> TokenSide:
        """Which side of the pool holds denom."""
        if denom == self.denom_a:
            return "A"
        if denom == self.denom_b:
            return "B"
        raise ValueError(f"Denom {denom} not in pool {self.id}")

    def get_reserves(self, token_in: TokenSide) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if token_in == "A":
            return self.reserve_a, self.reserve_b
        return self.reserve_b, self.reserve_a

    def denom_out(self, token_in: TokenSide) -> str:
        return self.denom_b if token_in == "A" else self.denom_a


class V2QuoteCalculator:
    """Constant-product swap math."""

    def get_amount_out(
        self,
        amount_in: int,
        reserve_in: int,
        reserve_out: int,
        fee_bps: int = 30,
    ) -> int:
        """Calculate output amount using the constant product formula.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool
            fee_bps: Pool fee in basis points

        Returns:
            Output token amount, 0 for empty pools or non-positive input
        """
        if amount_in <= 0:
            return 0
        if reserve_in <= 0 or reserve_out <= 0:
            return 0

        amount_in_after_fee = S(amount_in) * (BPS_DENOMINATOR - fee_bps) // BPS_DENOMINATOR
        numerator = S(reserve_out) * amount_in_after_fee
        denominator = S(reserve_in) + amount_in_after_fee
        if not denominator:
            return 0

        return (numerator // denominator).value

    def get_amount_in(
        self,
        amount_out: int,
        reserve_in: int,
        reserve_out: int,
        fee_bps: int = 30,
    ) -> int | None:
        """Calculate the input needed to receive amount_out.

        Inverts get_amount_out, rounding up at each step so that the returned
        input always yields at least amount_out.

        Returns:
            Required input amount, or None if the pool cannot deliver amount_out
        """
        if amount_out <= 0:
            return 0
        if reserve_in <= 0 or reserve_out <= 0:
            return None
        if amount_out >= reserve_out or fee_bps >= BPS_DENOMINATOR:
            return None

        after_fee = (S(reserve_in) * amount_out).ceiling_div(S(reserve_out) - amount_out)
        amount_in = (after_fee * BPS_DENOMINATOR).ceiling_div(BPS_DENOMINATOR - fee_bps)

        # Ceiling division of the fee can overshoot by one unit; walk back
        # while the smaller input still meets the target.
        result = amount_in.value
        while (
            result > 1
            and self.get_amount_out(result - 1, reserve_in, reserve_out, fee_bps) >= amount_out
        ):
            result -= 1
        return result

    def quote(self, pool: V2Pool, token_in: TokenSide, amount_in: int) -> int:
        """Output amount for selling amount_in of the token_in side of pool."""
        reserve_in, reserve_out = pool.get_reserves(token_in)
        return self.get_amount_out(amount_in, reserve_in, reserve_out, pool.fee_bps)

    def price_impact_percent(self, amount_in: int, reserve_in: int) -> float:
        """First-order price impact estimate, in percent.

        amount_in / (2 * reserve_in). Display only: the fee is reported
        separately and is not included here.
        """
        if reserve_in <= 0 or amount_in <= 0:
            return 0.0
        return amount_in / (2 * reserve_in) * 100

    def spot_price(self, pool: V2Pool) -> float:
        """Price of A in units of B implied by the reserves (0.0 if empty)."""
        if pool.reserve_a == 0:
            return 0.0
        return pool.reserve_b / pool.reserve_a


# Singleton instance
v2_calculator = V2QuoteCalculator()


__all__ = ["V2Pool", "V2QuoteCalculator", "v2_calculator"]
