"""V2 pool quote handler."""

from __future__ import annotations

import structlog

from gnomo.amm.v2 import V2Pool, V2QuoteCalculator, v2_calculator
from gnomo.routing.handlers.base import BaseHandler
from gnomo.routing.types import Quote

logger = structlog.get_logger()


class V2Handler(BaseHandler):
    """Quotes constant-product pools."""

    def __init__(self, calculator: V2QuoteCalculator | None = None) -> None:
        self.calculator = calculator or v2_calculator

    def quote(self, pool: V2Pool, denom_in: str, amount_in: int) -> Quote | None:
        if pool.is_empty:
            logger.debug("v2_pool_empty", pool_id=pool.id)
            return None
        token_in = pool.side_of(denom_in)
        amount_out = self.calculator.quote(pool, token_in, amount_in)
        return self._build_quote(pool, token_in, amount_in, amount_out)


__all__ = ["V2Handler"]
