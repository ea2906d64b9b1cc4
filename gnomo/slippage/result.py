"""Slippage and price impact result types."""

from dataclasses import dataclass
from enum import Enum


class ImpactSeverity(str, Enum):
    """Display classification of a trade's price impact."""

    BENIGN = "benign"
    CAUTION = "caution"
    WARNING = "warning"


@dataclass(frozen=True)
class TradeSummary:
    """User-facing figures derived from a selected quote.

    Attributes:
        amount_in: Amount sold
        amount_out: Expected output from the quote
        minimum_received: Floor the trade must not fall below at the given
            slippage tolerance; becomes the transaction's min-output argument
        trading_fee: Portion of amount_in taken by the pool fee
        price_impact_percent: Display estimate of the trade's own price impact
        severity: Classification of price_impact_percent for the UI
        slippage_bps: Tolerance the minimum was derived with
    """

    amount_in: int
    amount_out: int
    minimum_received: int
    trading_fee: int
    price_impact_percent: float
    severity: ImpactSeverity
    slippage_bps: int

    @property
    def needs_confirmation(self) -> bool:
        """True if the UI should ask before submitting."""
        return self.severity is ImpactSeverity.WARNING
