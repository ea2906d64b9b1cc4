"""Request and response models for the HTTP API.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from gnomo.amm.base import PoolKind
from gnomo.history.types import PricePoint, PriceStats
from gnomo.models.types import Amount, Bps, Denom
from gnomo.routing.types import Quote
from gnomo.slippage.result import ImpactSeverity, TradeSummary


class QuoteRequest(BaseModel):
    """Sell amount_in of denom_in for denom_out."""

    denom_in: Denom = Field(alias="denomIn")
    denom_out: Denom = Field(alias="denomOut")
    amount_in: Amount = Field(alias="amountIn")
    slippage_bps: Bps | None = Field(
        default=None,
        alias="slippageBps",
        description="Slippage tolerance; the server default applies if omitted",
    )

    model_config = {"populate_by_name": True}


class QuoteResponse(BaseModel):
    """Best route for a trade plus the figures shown before confirming it."""

    pool_kind: PoolKind = Field(alias="poolKind")
    pool_id: int = Field(alias="poolId")
    denom_in: str = Field(alias="denomIn")
    denom_out: str = Field(alias="denomOut")
    amount_in: Amount = Field(alias="amountIn")
    amount_out: Amount = Field(alias="amountOut")
    minimum_received: Amount = Field(alias="minimumReceived")
    trading_fee: Amount = Field(alias="tradingFee")
    fee_bps: int = Field(alias="feeBps")
    price_impact_percent: float = Field(alias="priceImpactPercent")
    severity: ImpactSeverity
    slippage_bps: int = Field(alias="slippageBps")
    needs_confirmation: bool = Field(alias="needsConfirmation")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_quote(cls, quote: Quote, summary: TradeSummary) -> QuoteResponse:
        return cls(
            pool_kind=quote.pool_kind,
            pool_id=quote.pool_id,
            denom_in=quote.denom_in,
            denom_out=quote.denom_out,
            amount_in=summary.amount_in,
            amount_out=summary.amount_out,
            minimum_received=summary.minimum_received,
            trading_fee=summary.trading_fee,
            fee_bps=quote.fee_bps,
            price_impact_percent=summary.price_impact_percent,
            severity=summary.severity,
            slippage_bps=summary.slippage_bps,
            needs_confirmation=summary.needs_confirmation,
        )


class PositionValueRequest(BaseModel):
    position_id: int = Field(alias="positionId", ge=0)

    model_config = {"populate_by_name": True}


class PositionValueResponse(BaseModel):
    """Current composition of a CLMM position."""

    position_id: int = Field(alias="positionId")
    pool_id: int = Field(alias="poolId")
    denom_a: str = Field(alias="denomA")
    denom_b: str = Field(alias="denomB")
    amount_a: Amount = Field(alias="amountA")
    amount_b: Amount = Field(alias="amountB")
    in_range: bool = Field(alias="inRange")

    model_config = {"populate_by_name": True}


class TickPriceResponse(BaseModel):
    tick: int
    price: float
    price_x6: int = Field(alias="priceX6")
    percentage: str

    model_config = {"populate_by_name": True}


class PriceTickResponse(BaseModel):
    price: float
    tick: int


class RecordPriceRequest(BaseModel):
    price: float


class RecordPriceResponse(BaseModel):
    pair: str
    recorded: bool


class PriceHistoryResponse(BaseModel):
    """Stored points for a pair and its 24h statistics (None without points)."""

    pair: str
    points: list[PricePoint]
    stats: PriceStats | None = None


__all__ = [
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
