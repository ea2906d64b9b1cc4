"""Tests for the local price history store."""

import json
import math

import pytest

from gnomo.config import HistoryConfig
from gnomo.history import JsonFileCache, PriceHistoryDocument, PriceHistoryStore, PricePoint

PAIR = "GNOT/USDC"
HOUR = 60 * 60


@pytest.fixture
def store(clock) -> PriceHistoryStore:
    return PriceHistoryStore(clock=clock)


class TestRecordPrice:
    """Tests for deduplication and bounds."""

    def test_first_point_recorded(self, store):
        assert store.record_price(PAIR, 1.25)
        points = store.get_history(PAIR)
        assert len(points) == 1
        assert points[0].price == 1.25

    def test_duplicate_within_interval_skipped(self, store, clock):
        """Under 30s and under 0.1% change is a no-op."""
        store.record_price(PAIR, 1.0)
        clock.advance(10)
        assert not store.record_price(PAIR, 1.0005)
        assert len(store.get_history(PAIR)) == 1

    def test_price_move_recorded_within_interval(self, store, clock):
        store.record_price(PAIR, 1.0)
        clock.advance(10)
        assert store.record_price(PAIR, 1.002)
        assert len(store.get_history(PAIR)) == 2

    def test_same_price_recorded_after_interval(self, store, clock):
        store.record_price(PAIR, 1.0)
        clock.advance(31)
        assert store.record_price(PAIR, 1.0)
        assert len(store.get_history(PAIR)) == 2

    @pytest.mark.parametrize("price", [0.0, -1.0, math.nan, math.inf])
    def test_invalid_price_ignored(self, store, price):
        assert not store.record_price(PAIR, price)
        assert store.get_history(PAIR) == []

    def test_capped_at_max_points(self, clock):
        """The oldest points are dropped once a pair exceeds max_points."""
        store = PriceHistoryStore(config=HistoryConfig(max_points=5), clock=clock)
        for i in range(10):
            store.record_price(PAIR, 1.0 + i)
            clock.advance(60)
        prices = [p.price for p in store.get_history(PAIR)]
        assert prices == [6.0, 7.0, 8.0, 9.0, 10.0]

    def test_pairs_independent(self, store):
        store.record_price(PAIR, 1.0)
        store.record_price("FOO/BAR", 1.0)
        assert sorted(store.pairs_with_history()) == ["FOO/BAR", PAIR]


class TestSweep:
    """Tests for the lazy age sweep."""

    def test_old_points_purged_on_write(self, store, clock):
        """A write more than an hour after the last sweep purges points older than 24h."""
        store.record_price(PAIR, 1.0)
        clock.advance(25 * HOUR)
        store.record_price("FOO/BAR", 2.0)
        assert store.get_history(PAIR) == []
        assert store.pairs_with_history() == ["FOO/BAR"]

    def test_recent_points_survive(self, store, clock):
        store.record_price(PAIR, 1.0)
        clock.advance(2 * HOUR)
        store.record_price(PAIR, 1.1)
        assert len(store.get_history(PAIR)) == 2

    def test_no_sweep_within_interval(self, clock):
        """Sweeps run at most once per sweep interval."""
        config = HistoryConfig(max_age_seconds=60, sweep_interval_seconds=HOUR)
        store = PriceHistoryStore(config=config, clock=clock)
        store.record_price(PAIR, 1.0)
        clock.advance(120)
        store.record_price(PAIR, 2.0)
        assert len(store.get_history(PAIR)) == 2


class TestStats:
    """Tests for 24h statistics."""

    def test_no_history(self, store):
        assert store.get_stats(PAIR) is None

    def test_stats(self, store, clock):
        for price in [1.0, 1.2, 0.9, 1.1]:
            store.record_price(PAIR, price)
            clock.advance(60)
        stats = store.get_stats(PAIR)
        assert stats.current == 1.1
        assert stats.change_24h == pytest.approx(0.1)
        assert stats.change_percent_24h == pytest.approx(10.0)
        assert stats.high_24h == 1.2
        assert stats.low_24h == 0.9

    def test_stats_without_recent_points(self, store, clock):
        """With nothing inside the window, deltas are zero and high/low equal current."""
        store.record_price(PAIR, 1.5)
        clock.advance(25 * HOUR)
        stats = store.get_stats(PAIR)
        assert stats.current == 1.5
        assert stats.change_24h == 0.0
        assert stats.change_percent_24h == 0.0
        assert stats.high_24h == stats.low_24h == 1.5

    def test_stats_serialize_camel_case(self, store):
        store.record_price(PAIR, 2.0)
        data = store.get_stats(PAIR).model_dump(by_alias=True)
        assert set(data) == {"current", "change24h", "changePercent24h", "high24h", "low24h"}


class TestPersistence:
    """Tests for the JSON file cache."""

    def test_history_survives_restart(self, tmp_path, clock):
        cache = JsonFileCache(tmp_path / "prices.json", PriceHistoryDocument)
        PriceHistoryStore(cache=cache, clock=clock).record_price(PAIR, 3.0)

        reopened = PriceHistoryStore(cache=cache, clock=clock)
        assert [p.price for p in reopened.get_history(PAIR)] == [3.0]

    @pytest.mark.parametrize("content", ["not json", '{"pairs": 5}', ""])
    def test_unreadable_cache_starts_empty(self, tmp_path, clock, content):
        """Corrupt or mismatched cache files are treated as no history."""
        path = tmp_path / "prices.json"
        path.write_text(content)
        store = PriceHistoryStore(cache=JsonFileCache(path, PriceHistoryDocument), clock=clock)
        assert store.pairs_with_history() == []
        assert store.record_price(PAIR, 1.0)
        assert json.loads(path.read_text())["pairs"][PAIR][0]["price"] == 1.0

    @pytest.mark.parametrize("bad_price", ["0.0", "-2.5"])
    def test_cache_with_invalid_price_starts_empty(self, tmp_path, clock, bad_price):
        """Points that could never have been recorded invalidate the cache."""
        path = tmp_path / "prices.json"
        path.write_text(
            f'{{"pairs": {{"{PAIR}": [{{"timestamp": {clock()}, "price": {bad_price}}}]}}, '
            f'"last_cleanup": {clock()}}}'
        )
        store = PriceHistoryStore(cache=JsonFileCache(path, PriceHistoryDocument), clock=clock)
        assert store.get_stats(PAIR) is None
        assert store.record_price(PAIR, 1.0)
        assert store.get_stats(PAIR).current == 1.0

    def test_zero_price_in_memory_does_not_raise(self, clock):
        """Dedupe and stats tolerate a non-positive stored price."""

        class PreloadedCache:
            def load(self):
                point = PricePoint.model_construct(timestamp=clock(), price=0.0)
                return PriceHistoryDocument(pairs={PAIR: [point]}, last_cleanup=clock())

            def save(self, document):
                return True

        store = PriceHistoryStore(cache=PreloadedCache(), clock=clock)
        stats = store.get_stats(PAIR)
        assert stats.current == 0.0
        assert stats.change_percent_24h == 0.0
        assert store.record_price(PAIR, 1.0)
        assert store.get_stats(PAIR).change_percent_24h == 0.0

    def test_unwritable_cache_does_not_raise(self, tmp_path, clock):
        """A cache path that cannot be written is logged, not raised."""
        blocker = tmp_path / "file"
        blocker.write_text("x")
        cache = JsonFileCache(blocker / "prices.json", PriceHistoryDocument)
        store = PriceHistoryStore(cache=cache, clock=clock)
        assert store.record_price(PAIR, 1.0)
        assert len(store.get_history(PAIR)) == 1

    def test_clear(self, tmp_path, clock):
        path = tmp_path / "prices.json"
        store = PriceHistoryStore(cache=JsonFileCache(path, PriceHistoryDocument), clock=clock)
        store.record_price(PAIR, 1.0)
        assert path.exists()
        store.clear()
        assert not path.exists()
        assert store.get_history(PAIR) == []
