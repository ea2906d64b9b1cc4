"""Pydantic models for the HTTP API."""

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
from gnomo.models.types import Amount, Bps, Denom, coerce_amount, coerce_denom

__all__ = [
    # Field types
    "Amount",
    "Bps",
    "Denom",
    "coerce_amount",
    "coerce_denom",
    # API
    "PositionValueRequest",
    "PositionValueResponse",
    "PriceHistoryResponse",
    "PriceTickResponse",
    "QuoteRequest",
    "QuoteResponse",
    "RecordPriceRequest",
    "RecordPriceResponse",
    "TickPriceResponse",
]
