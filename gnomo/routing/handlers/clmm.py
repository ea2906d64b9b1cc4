"""CLMM pool quote handler."""

from __future__ import annotations

import structlog

from gnomo.amm.clmm import CLMMPool, CLMMQuoteCalculator, clmm_calculator
from gnomo.routing.handlers.base import BaseHandler
from gnomo.routing.types import Quote

logger = structlog.get_logger()


class CLMMHandler(BaseHandler):
    """Quotes concentrated liquidity pools from their active range.

    Estimates beyond the calculator's sanity ceiling come back as None and
    the pool drops out of the comparison.
    """

    def __init__(self, calculator: CLMMQuoteCalculator | None = None) -> None:
        self.calculator = calculator or clmm_calculator

    def quote(self, pool: CLMMPool, denom_in: str, amount_in: int) -> Quote | None:
        if pool.is_empty:
            logger.debug("clmm_pool_empty", pool_id=pool.id)
            return None
        token_in = pool.side_of(denom_in)
        amount_out = self.calculator.quote(pool, token_in, amount_in)
        return self._build_quote(pool, token_in, amount_in, amount_out)


__all__ = ["CLMMHandler"]
