"""Best single-pool route selection.

For a token pair, every V2 pool and every CLMM pool trading that pair is
quoted and the largest output wins. Evaluation order is fixed (V2 pools
before CLMM pools, each in ascending pool id) and ties keep the first pool
seen, so the same inputs always select the same pool.

Selection is greedy over single pools: no splitting across pools and no
multi-hop paths.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from gnomo.amm.base import canonical_pair
from gnomo.amm.clmm import CLMMPool, CLMMQuoteCalculator
from gnomo.amm.v2 import V2Pool, V2QuoteCalculator
from gnomo.errors import QuoteUnavailable
from gnomo.pools import AnyPool, PoolRegistry
from gnomo.routing.handlers import CLMMHandler, PoolHandler, V2Handler
from gnomo.routing.types import Quote

logger = structlog.get_logger()


def _matching(pools: Iterable[AnyPool], pair: tuple[str, str]) -> list[AnyPool]:
    """Pools trading pair, in ascending id."""
    matched = [p for p in pools if canonical_pair(p.denom_a, p.denom_b) == pair]
    return sorted(matched, key=lambda p: p.id)


class RouteSelector:
    """Selects the pool giving the largest output for a trade.

    Args:
        v2_calculator: Constant-product math. Defaults to the shared instance.
        clmm_calculator: CLMM estimator (carries the sanity ceiling).
            Defaults to the shared instance.
    """

    def __init__(
        self,
        v2_calculator: V2QuoteCalculator | None = None,
        clmm_calculator: CLMMQuoteCalculator | None = None,
    ) -> None:
        self._handlers: dict[type, PoolHandler] = {
            V2Pool: V2Handler(v2_calculator),
            CLMMPool: CLMMHandler(clmm_calculator),
        }

    def _handler_for(self, pool: AnyPool) -> PoolHandler:
        handler = self._handlers.get(type(pool))
        if handler is None:
            raise TypeError(f"No handler registered for pool type {type(pool).__name__}")
        return handler

    def quote_all(
        self,
        denom_in: str,
        denom_out: str,
        amount_in: int,
        v2_pools: Sequence[V2Pool],
        clmm_pools: Sequence[CLMMPool],
    ) -> list[Quote]:
        """Quote every pool trading the pair, in evaluation order.

        Pools that yield no positive, sane output are left out.
        """
        if amount_in <= 0 or denom_in == denom_out:
            return []

        pair = canonical_pair(denom_in, denom_out)
        candidates = [*_matching(v2_pools, pair), *_matching(clmm_pools, pair)]

        quotes: list[Quote] = []
        for pool in candidates:
            quote = self._handler_for(pool).quote(pool, denom_in, amount_in)
            if quote is not None:
                quotes.append(quote)
        return quotes

    def best_quote(
        self,
        denom_in: str,
        denom_out: str,
        amount_in: int,
        v2_pools: Sequence[V2Pool],
        clmm_pools: Sequence[CLMMPool],
    ) -> Quote | None:
        """Find the pool with the largest output for selling amount_in of denom_in.

        Args:
            denom_in: Token being sold
            denom_out: Token being bought
            amount_in: Amount of denom_in, in its smallest unit
            v2_pools: Candidate V2 pools (any pair; filtered here)
            clmm_pools: Candidate CLMM pools (any pair; filtered here)

        Returns:
            The best Quote, or None if no pool yields a positive, sane output
        """
        best: Quote | None = None
        for quote in self.quote_all(denom_in, denom_out, amount_in, v2_pools, clmm_pools):
            # Strict comparison keeps the first pool on ties
            if best is None or quote.amount_out > best.amount_out:
                best = quote

        if best is None:
            logger.debug(
                "no_route_found",
                denom_in=denom_in,
                denom_out=denom_out,
                amount_in=amount_in,
            )
        else:
            logger.debug(
                "route_selected",
                pool_kind=best.pool_kind.value,
                pool_id=best.pool_id,
                amount_in=amount_in,
                amount_out=best.amount_out,
            )
        return best

    def require_quote(
        self,
        denom_in: str,
        denom_out: str,
        amount_in: int,
        v2_pools: Sequence[V2Pool],
        clmm_pools: Sequence[CLMMPool],
    ) -> Quote:
        """Like best_quote, but raise when no route exists.

        Raises:
            QuoteUnavailable: If no pool yields a positive, sane output
        """
        quote = self.best_quote(denom_in, denom_out, amount_in, v2_pools, clmm_pools)
        if quote is None:
            raise QuoteUnavailable(f"No route for {amount_in} {denom_in} -> {denom_out}")
        return quote

    def best_quote_from_registry(
        self,
        registry: PoolRegistry,
        denom_in: str,
        denom_out: str,
        amount_in: int,
    ) -> Quote | None:
        """best_quote over the pools a registry holds for the pair."""
        return self.best_quote(
            denom_in,
            denom_out,
            amount_in,
            registry.get_v2_pools(denom_in, denom_out),
            registry.get_clmm_pools(denom_in, denom_out),
        )


# Default instance
route_selector = RouteSelector()


def best_quote(
    denom_in: str,
    denom_out: str,
    amount_in: int,
    v2_pools: Sequence[V2Pool],
    clmm_pools: Sequence[CLMMPool],
) -> Quote | None:
    """best_quote using the default selector."""
    return route_selector.best_quote(denom_in, denom_out, amount_in, v2_pools, clmm_pools)


__all__ = ["RouteSelector", "best_quote", "route_selector"]
