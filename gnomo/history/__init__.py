"""Local price and volume history.

Usage:
    from gnomo.history import PriceHistoryStore, JsonFileCache, PriceHistoryDocument

    store = PriceHistoryStore(cache=JsonFileCache(path, PriceHistoryDocument))
    store.record_price("GNOT/USDC", 1.25)
    stats = store.get_stats("GNOT/USDC")
"""

from gnomo.history.price import PriceHistoryStore
from gnomo.history.storage import JsonFileCache
from gnomo.history.types import (
    PriceHistoryDocument,
    PricePoint,
    PriceStats,
    VolumeEntry,
    VolumeHistoryDocument,
)
from gnomo.history.volume import VolumeHistoryStore

__all__ = [
    "PriceHistoryStore",
    "VolumeHistoryStore",
    "JsonFileCache",
    "PricePoint",
    "PriceStats",
    "VolumeEntry",
    "PriceHistoryDocument",
    "VolumeHistoryDocument",
]
