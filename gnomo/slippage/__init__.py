"""Slippage protection and trade figures.

Usage:
    from gnomo.slippage import SlippageGuard

    summary = SlippageGuard().summarize(quote, slippage_bps=50)
    summary.minimum_received  # min-output for the transaction
"""

from gnomo.slippage.guard import SlippageGuard, minimum_received, slippage_guard, trading_fee
from gnomo.slippage.result import ImpactSeverity, TradeSummary

__all__ = [
    "SlippageGuard",
    "slippage_guard",
    "minimum_received",
    "trading_fee",
    "ImpactSeverity",
    "TradeSummary",
]
