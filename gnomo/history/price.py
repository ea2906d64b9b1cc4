"""Local price history per trading pair.

Each pair keeps a short series for charts and 24h statistics. Writes are
deduplicated: a point is appended only if enough time has passed since the
previous one or the price moved enough; otherwise the call is a no-op.
Series are capped in length, and a lazy sweep (at most once per sweep
interval, run on write) purges points past the age window for all pairs.

The store never raises to callers. Invalid prices are ignored and an
unreadable cache starts an empty history.
"""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Callable

import structlog

from gnomo.config import DEFAULT_HISTORY_CONFIG, HistoryConfig
from gnomo.history.storage import JsonFileCache
from gnomo.history.types import PriceHistoryDocument, PricePoint, PriceStats

logger = structlog.get_logger()


class PriceHistoryStore:
    """Deduplicated, bounded price series keyed by pair label (e.g. "GNOT/USDC").

    All reads and writes go through one lock per store, so concurrent
    record_price calls cannot lose updates.

    Args:
        config: Retention and deduplication rules
        cache: Optional file cache; loaded once at construction and written
            after every change
        clock: Returns the current time in seconds (injectable for tests)
    """

    def __init__(
        self,
        config: HistoryConfig | None = None,
        cache: JsonFileCache[PriceHistoryDocument] | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config or DEFAULT_HISTORY_CONFIG
        self._cache = cache
        self._clock = clock
        self._lock = threading.Lock()
        self._document = self._load()

    def _load(self) -> PriceHistoryDocument:
        document = self._cache.load() if self._cache is not None else None
        if document is None:
            return PriceHistoryDocument(last_cleanup=self._clock())
        return document

    def _persist(self) -> None:
        if self._cache is not None:
            self._cache.save(self._document)

    def _sweep(self, now: float) -> None:
        """Drop points past the age window and trim every pair to max_points."""
        cutoff = now - self.config.max_age_seconds
        cleaned: dict[str, list[PricePoint]] = {}
        for pair, points in self._document.pairs.items():
            kept = [p for p in points if p.timestamp > cutoff]
            if kept:
                cleaned[pair] = kept[-self.config.max_points :]
        removed = sum(len(p) for p in self._document.pairs.values()) - sum(
            len(p) for p in cleaned.values()
        )
        self._document.pairs = cleaned
        self._document.last_cleanup = now
        logger.debug("price_history_swept", removed=removed, pairs=len(cleaned))

    def record_price(self, pair: str, price: float) -> bool:
        """Record a price for pair unless it duplicates the last point.

        A point is appended if at least min_interval_seconds have passed since
        the pair's last point, or the price moved by at least min_change_ratio.

        Returns:
            True if a point was appended
        """
        if not math.isfinite(price) or price <= 0:
            return False

        with self._lock:
            now = self._clock()

            if now - self._document.last_cleanup > self.config.sweep_interval_seconds:
                self._sweep(now)

            points = self._document.pairs.setdefault(pair, [])
            if points:
                last = points[-1]
                time_diff = now - last.timestamp
                # A non-positive previous price never deduplicates.
                price_diff = (
                    abs(price - last.price) / last.price if last.price > 0 else math.inf
                )
                if (
                    time_diff < self.config.min_interval_seconds
                    and price_diff < self.config.min_change_ratio
                ):
                    return False

            points.append(PricePoint(timestamp=now, price=price))
            if len(points) > self.config.max_points:
                del points[: len(points) - self.config.max_points]

            self._persist()
            return True

    def get_history(self, pair: str) -> list[PricePoint]:
        """Points recorded for pair, oldest first."""
        with self._lock:
            return list(self._document.pairs.get(pair, []))

    def pairs_with_history(self) -> list[str]:
        with self._lock:
            return [pair for pair, points in self._document.pairs.items() if points]

    def get_stats(self, pair: str) -> PriceStats | None:
        """24h statistics for pair, or None if it has no points.

        current is always the latest point. Changes, high and low use only
        points inside the stats window; without any, changes are zero and
        high/low equal current.
        """
        points = self.get_history(pair)
        if not points:
            return None

        window_start = self._clock() - self.config.stats_window_seconds
        current = points[-1].price
        recent = [p.price for p in points if p.timestamp > window_start]

        if not recent:
            return PriceStats(
                current=current,
                change_24h=0.0,
                change_percent_24h=0.0,
                high_24h=current,
                low_24h=current,
            )

        oldest = recent[0]
        change = current - oldest
        return PriceStats(
            current=current,
            change_24h=change,
            change_percent_24h=change / oldest * 100 if oldest > 0 else 0.0,
            high_24h=max(recent),
            low_24h=min(recent),
        )

    def clear(self) -> None:
        """Forget all history, including the cache file."""
        with self._lock:
            self._document = PriceHistoryDocument(last_cleanup=self._clock())
            if self._cache is not None:
                self._cache.clear()


__all__ = ["PriceHistoryStore"]
