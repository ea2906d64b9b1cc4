"""Minimum-received, fee and price impact figures for a selected quote.

Integer results (minimum received, trading fee) feed the transaction and
use integer arithmetic only. Price impact is a float for display.
"""

from __future__ import annotations

import structlog

from gnomo.amm.clmm import CLMMPool
from gnomo.amm.v2 import V2Pool, V2QuoteCalculator, v2_calculator
from gnomo.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from gnomo.constants import BPS_DENOMINATOR
from gnomo.routing.types import Quote
from gnomo.safe_int import S
from gnomo.slippage.result import ImpactSeverity, TradeSummary

logger = structlog.get_logger()


def _check_bps(name: str, value: int) -> None:
    if not 0 <= value <= BPS_DENOMINATOR:
        raise ValueError(f"{name} must be in [0, {BPS_DENOMINATOR}], got {value}")


def minimum_received(amount_out: int, slippage_bps: int) -> int:
    """amount_out reduced by the slippage tolerance, rounded down.

    Raises:
        ValueError: If slippage_bps is outside [0, 10000]
    """
    _check_bps("slippage_bps", slippage_bps)
    return (S(amount_out) * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR).value


def trading_fee(amount_in: int, fee_bps: int) -> int:
    """Portion of amount_in charged as pool fee, rounded down."""
    _check_bps("fee_bps", fee_bps)
    return (S(amount_in) * fee_bps // BPS_DENOMINATOR).value


class SlippageGuard:
    """Derives user-facing trade figures from a quote.

    Severity is a display classification only; whether to block a trade on
    it is the caller's decision.
    """

    def __init__(
        self,
        config: QuoteConfig | None = None,
        v2: V2QuoteCalculator | None = None,
    ):
        self.config = config or DEFAULT_QUOTE_CONFIG
        self._v2 = v2 or v2_calculator

    def price_impact_percent(self, quote: Quote) -> float:
        """Estimated price impact of the quoted trade, in percent.

        V2: first-order estimate amount_in / (2 * reserve_in).
        CLMM: shortfall of the executed rate against the fee-adjusted pool
        rate, floored at zero.
        """
        pool = quote.pool
        if isinstance(pool, V2Pool):
            reserve_in, _ = pool.get_reserves(quote.token_in)
            return self._v2.price_impact_percent(quote.amount_in, reserve_in)

        if isinstance(pool, CLMMPool):
            return self._clmm_price_impact(pool, quote)

        raise TypeError(f"Unknown pool type: {type(pool).__name__}")

    def _clmm_price_impact(self, pool: CLMMPool, quote: Quote) -> float:
        if quote.amount_in <= 0 or pool.price_x6 <= 0:
            return 0.0

        rate = pool.price if quote.token_in == "A" else 1 / pool.price
        expected = rate * (BPS_DENOMINATOR - pool.fee_bps) / BPS_DENOMINATOR
        if expected <= 0:
            return 0.0

        actual = quote.amount_out / quote.amount_in
        return max(0.0, (expected - actual) / expected * 100)

    def classify_impact(self, impact_percent: float) -> ImpactSeverity:
        if impact_percent >= self.config.warning_impact_percent:
            return ImpactSeverity.WARNING
        if impact_percent >= self.config.caution_impact_percent:
            return ImpactSeverity.CAUTION
        return ImpactSeverity.BENIGN

    def summarize(self, quote: Quote, slippage_bps: int | None = None) -> TradeSummary:
        """Bundle minimum received, fee and price impact for a quote.

        Args:
            quote: The selected quote
            slippage_bps: Tolerance in basis points. Defaults to the
                configured default (50 = 0.5%).

        Raises:
            ValueError: If slippage_bps is outside [0, 10000]
        """
        if slippage_bps is None:
            slippage_bps = self.config.default_slippage_bps

        impact = self.price_impact_percent(quote)
        severity = self.classify_impact(impact)
        if severity is not ImpactSeverity.BENIGN:
            logger.debug(
                "high_price_impact",
                pool_id=quote.pool_id,
                pool_kind=quote.pool_kind.value,
                impact_percent=round(impact, 4),
                severity=severity.value,
            )

        return TradeSummary(
            amount_in=quote.amount_in,
            amount_out=quote.amount_out,
            minimum_received=minimum_received(quote.amount_out, slippage_bps),
            trading_fee=trading_fee(quote.amount_in, quote.fee_bps),
            price_impact_percent=impact,
            severity=severity,
            slippage_bps=slippage_bps,
        )


# Default instance
slippage_guard = SlippageGuard()


__all__ = ["SlippageGuard", "minimum_received", "slippage_guard", "trading_fee"]
