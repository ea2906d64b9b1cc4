"""Time series records for price and volume history."""

from pydantic import BaseModel, Field


class PricePoint(BaseModel):
    """Price of a pair at a moment (seconds since the epoch)."""

    timestamp: float = Field(allow_inf_nan=False)
    price: float = Field(gt=0, allow_inf_nan=False)


class PriceStats(BaseModel):
    """24h summary of a pair's price history."""

    current: float
    change_24h: float = Field(alias="change24h")
    change_percent_24h: float = Field(alias="changePercent24h")
    high_24h: float = Field(alias="high24h")
    low_24h: float = Field(alias="low24h")

    model_config = {"populate_by_name": True}


class VolumeEntry(BaseModel):
    """Swap volume recorded for a pair, in USD equivalent."""

    timestamp: float
    amount_usd: float
    pair: str


class PriceHistoryDocument(BaseModel):
    """Persisted shape of the price history cache."""

    pairs: dict[str, list[PricePoint]] = Field(default_factory=dict)
    last_cleanup: float = 0.0


class VolumeHistoryDocument(BaseModel):
    """Persisted shape of the volume history cache."""

    entries: list[VolumeEntry] = Field(default_factory=list)
    last_cleanup: float = 0.0


__all__ = [
    "PricePoint",
    "PriceStats",
    "VolumeEntry",
    "PriceHistoryDocument",
    "VolumeHistoryDocument",
]
