"""API endpoints for the quote engine."""

import os
from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from gnomo.amm.clmm import is_in_range, position_value
from gnomo.history import JsonFileCache, PriceHistoryDocument, PriceHistoryStore
from gnomo.math.ticks import price_to_tick, tick_to_percentage, tick_to_price, tick_to_price_x6
from gnomo.models.api import (
    PositionValueRequest,
    PositionValueResponse,
    PriceHistoryResponse,
    PriceTickResponse,
    QuoteRequest,
    QuoteResponse,
    RecordPriceRequest,
    RecordPriceResponse,
    TickPriceResponse,
)
from gnomo.routing import RouteSelector, route_selector
from gnomo.rpc import PoolSource, StaticPoolSource
from gnomo.slippage import SlippageGuard, slippage_guard

logger = structlog.get_logger()

router = APIRouter()


@lru_cache(maxsize=1)
def _default_pool_source() -> StaticPoolSource:
    return StaticPoolSource()


@lru_cache(maxsize=1)
def _default_price_history() -> PriceHistoryStore:
    path = os.environ.get("GNOMO_HISTORY_PATH")
    cache = JsonFileCache(path, PriceHistoryDocument) if path else None
    return PriceHistoryStore(cache=cache)


def get_pool_source() -> PoolSource:
    """Dependency provider for pool state.

    The default source is empty; deployments and tests supply a real one:
        app.dependency_overrides[get_pool_source] = lambda: QueryPoolSource(query)
    """
    return _default_pool_source()


def get_price_history() -> PriceHistoryStore:
    """Dependency provider for the price history store.

    Persists to GNOMO_HISTORY_PATH when set, otherwise keeps history in memory.
    """
    return _default_price_history()


def get_route_selector() -> RouteSelector:
    return route_selector


def get_slippage_guard() -> SlippageGuard:
    return slippage_guard


@router.post("/quote")
def quote(
    request: QuoteRequest,
    source: PoolSource = Depends(get_pool_source),
    selector: RouteSelector = Depends(get_route_selector),
    guard: SlippageGuard = Depends(get_slippage_guard),
) -> QuoteResponse:
    """Best single-pool quote for a trade, with minimum received and impact.

    Error Handling:
        - No pool yields a positive output: 404
        - Invalid request schema: 422 (Pydantic)
    """
    best = selector.best_quote(
        request.denom_in,
        request.denom_out,
        request.amount_in,
        source.list_v2_pools(),
        source.list_clmm_pools(),
    )
    if best is None:
        raise HTTPException(
            status_code=404,
            detail=f"No route for {request.denom_in} -> {request.denom_out}",
        )

    summary = guard.summarize(best, request.slippage_bps)
    logger.info(
        "quote_served",
        denom_in=request.denom_in,
        denom_out=request.denom_out,
        amount_in=request.amount_in,
        pool_kind=best.pool_kind.value,
        pool_id=best.pool_id,
        amount_out=best.amount_out,
    )
    return QuoteResponse.from_quote(best, summary)


@router.post("/positions/value")
def value_position(
    request: PositionValueRequest,
    source: PoolSource = Depends(get_pool_source),
) -> PositionValueResponse:
    """Token amounts a CLMM position holds at its pool's current price."""
    position = source.get_position(request.position_id)
    if position is None:
        raise HTTPException(status_code=404, detail=f"Position {request.position_id} not found")

    pool = next((p for p in source.list_clmm_pools() if p.id == position.pool_id), None)
    if pool is None:
        raise HTTPException(status_code=404, detail=f"Pool {position.pool_id} not found")

    amounts = position_value(position, pool.price)
    return PositionValueResponse(
        position_id=position.id,
        pool_id=pool.id,
        denom_a=pool.denom_a,
        denom_b=pool.denom_b,
        amount_a=amounts.amount_a,
        amount_b=amounts.amount_b,
        in_range=is_in_range(position, pool.current_tick),
    )


@router.get("/ticks/{tick}/price")
def tick_price(tick: int) -> TickPriceResponse:
    return TickPriceResponse(
        tick=tick,
        price=tick_to_price(tick),
        price_x6=tick_to_price_x6(tick),
        percentage=tick_to_percentage(tick),
    )


@router.get("/prices/tick")
def price_tick(price: float = Query(...)) -> PriceTickResponse:
    return PriceTickResponse(price=price, tick=price_to_tick(price))


@router.post("/history/{pair:path}")
def record_price(
    pair: str,
    request: RecordPriceRequest,
    history: PriceHistoryStore = Depends(get_price_history),
) -> RecordPriceResponse:
    """Record a price point; duplicates and invalid prices are ignored."""
    return RecordPriceResponse(pair=pair, recorded=history.record_price(pair, request.price))


@router.get("/history/{pair:path}")
def price_history(
    pair: str,
    history: PriceHistoryStore = Depends(get_price_history),
) -> PriceHistoryResponse:
    return PriceHistoryResponse(
        pair=pair,
        points=history.get_history(pair),
        stats=history.get_stats(pair),
    )


__all__ = [
    "get_pool_source",
    "get_price_history",
    "get_route_selector",
    "get_slippage_guard",
    "router",
]
