"""Single-range CLMM swap estimates.

The pool snapshot carries only the liquidity active at the current tick, so
a quote assumes that liquidity covers the whole trade. Within one range a
concentrated position behaves like a constant-product pool over its virtual
reserves:

    virtual_a = L / sqrt(P)
    virtual_b = L * sqrt(P)

which is what get_amount_out prices against. A trade large enough to leave
the range cannot be represented, so outputs above a configured fraction of
the active liquidity are rejected instead of reported.
"""

from __future__ import annotations

from math import isqrt

import structlog

from gnomo.amm.base import TokenSide
from gnomo.amm.v2 import V2QuoteCalculator, v2_calculator
from gnomo.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from gnomo.constants import PRICE_SCALE, SQRT_PRICE_SCALE
from gnomo.errors import UnreliableExtrapolation

from .pool import CLMMPool

logger = structlog.get_logger()


def sqrt_price_scaled(price_x6: int) -> int:
    """sqrt(price) * 1e9 for a 1e6 fixed-point price, floored."""
    return isqrt(price_x6 * SQRT_PRICE_SCALE**2 // PRICE_SCALE)


class CLMMQuoteCalculator:
    """Estimates CLMM swap output from the active range alone."""

    def __init__(
        self,
        config: QuoteConfig | None = None,
        v2: V2QuoteCalculator | None = None,
    ):
        """Initialize the calculator.

        Args:
            config: Quote configuration (sanity ceiling). Defaults to DEFAULT_QUOTE_CONFIG.
            v2: Constant-product math applied to the virtual reserves.
        """
        self.config = config or DEFAULT_QUOTE_CONFIG
        self._v2 = v2 or v2_calculator
        if self.config.clmm_sanity_ceiling_divisor <= 0:
            raise ValueError("clmm_sanity_ceiling_divisor must be positive")

    def virtual_reserves(self, pool: CLMMPool, token_in: TokenSide) -> tuple[int, int]:
        """Virtual (reserve_in, reserve_out) of the active range."""
        sqrt_p = sqrt_price_scaled(pool.price_x6)
        if sqrt_p == 0:
            return 0, 0
        virtual_a = pool.liquidity * SQRT_PRICE_SCALE // sqrt_p
        virtual_b = pool.liquidity * sqrt_p // SQRT_PRICE_SCALE
        if token_in == "A":
            return virtual_a, virtual_b
        return virtual_b, virtual_a

    def output_ceiling(self, pool: CLMMPool) -> int:
        """Largest output the single-range model will stand behind."""
        return pool.liquidity // self.config.clmm_sanity_ceiling_divisor

    def get_amount_out(self, pool: CLMMPool, token_in: TokenSide, amount_in: int) -> int:
        """Estimate output for selling amount_in of the token_in side.

        Returns:
            Output amount, 0 for empty pools or non-positive input

        Raises:
            UnreliableExtrapolation: If the output exceeds the sanity ceiling
        """
        if amount_in <= 0 or pool.is_empty:
            return 0

        reserve_in, reserve_out = self.virtual_reserves(pool, token_in)
        amount_out = self._v2.get_amount_out(amount_in, reserve_in, reserve_out, pool.fee_bps)

        ceiling = self.output_ceiling(pool)
        if amount_out > ceiling:
            raise UnreliableExtrapolation(
                f"Pool {pool.id}: output {amount_out} exceeds single-range ceiling {ceiling}"
            )
        return amount_out

    def quote(self, pool: CLMMPool, token_in: TokenSide, amount_in: int) -> int | None:
        """Estimate output, or None when the estimate is unavailable.

        Unlike get_amount_out, an estimate beyond the sanity ceiling is
        reported as None (quote unavailable) rather than raised.
        """
        try:
            return self.get_amount_out(pool, token_in, amount_in)
        except UnreliableExtrapolation:
            logger.debug(
                "clmm_quote_unreliable",
                pool_id=pool.id,
                token_in=token_in,
                amount_in=amount_in,
                ceiling=self.output_ceiling(pool),
            )
            return None


# Default instance
clmm_calculator = CLMMQuoteCalculator()


__all__ = ["CLMMQuoteCalculator", "clmm_calculator", "sqrt_price_scaled"]
