"""Route selection.

Module structure:
- router.py: RouteSelector, best single-pool selection across pool kinds
- types.py: Quote dataclass
- handlers/: Pool-specific quote handlers (V2, CLMM)
"""

from gnomo.routing.router import RouteSelector, best_quote, route_selector
from gnomo.routing.types import Quote

__all__ = ["Quote", "RouteSelector", "best_quote", "route_selector"]
