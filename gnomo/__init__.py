"""Gnomo DEX quote and routing engine."""

from gnomo.routing import RouteSelector, best_quote
from gnomo.slippage import SlippageGuard

__version__ = "0.1.0"
__all__ = ["RouteSelector", "SlippageGuard", "best_quote", "__version__"]
