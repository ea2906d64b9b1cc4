"""Local 24h swap volume.

Unlike price history, every swap is recorded; entries past the age window
are purged by the same lazy sweep and excluded from totals.
"""

from __future__ import annotations

import math
import threading
import time
from collections.abc import Callable

import structlog

from gnomo.config import DEFAULT_HISTORY_CONFIG, HistoryConfig
from gnomo.history.storage import JsonFileCache
from gnomo.history.types import VolumeEntry, VolumeHistoryDocument

logger = structlog.get_logger()


class VolumeHistoryStore:
    """Swap volume entries in USD equivalent, for 24h totals."""

    def __init__(
        self,
        config: HistoryConfig | None = None,
        cache: JsonFileCache[VolumeHistoryDocument] | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config or DEFAULT_HISTORY_CONFIG
        self._cache = cache
        self._clock = clock
        self._lock = threading.Lock()
        document = cache.load() if cache is not None else None
        self._document = document or VolumeHistoryDocument(last_cleanup=clock())

    def record_volume(self, pair: str, amount_usd: float) -> bool:
        """Record a swap's volume. Non-positive or non-finite amounts are ignored."""
        if not math.isfinite(amount_usd) or amount_usd <= 0:
            return False

        with self._lock:
            now = self._clock()
            if now - self._document.last_cleanup > self.config.sweep_interval_seconds:
                cutoff = now - self.config.max_age_seconds
                before = len(self._document.entries)
                self._document.entries = [e for e in self._document.entries if e.timestamp > cutoff]
                self._document.last_cleanup = now
                logger.debug("volume_history_swept", removed=before - len(self._document.entries))

            self._document.entries.append(VolumeEntry(timestamp=now, amount_usd=amount_usd, pair=pair))
            if self._cache is not None:
                self._cache.save(self._document)
            return True

    def _recent(self) -> list[VolumeEntry]:
        cutoff = self._clock() - self.config.stats_window_seconds
        with self._lock:
            return [e for e in self._document.entries if e.timestamp > cutoff]

    def volume_24h(self) -> float:
        """Total volume across all pairs within the stats window."""
        return sum(e.amount_usd for e in self._recent())

    def volume_24h_for_pair(self, pair: str) -> float:
        return sum(e.amount_usd for e in self._recent() if e.pair == pair)

    def clear(self) -> None:
        with self._lock:
            self._document = VolumeHistoryDocument(last_cleanup=self._clock())
            if self._cache is not None:
                self._cache.clear()


__all__ = ["VolumeHistoryStore"]
