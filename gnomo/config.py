"""Configuration for quoting and price history."""

from dataclasses import dataclass


@dataclass(frozen=True)
class QuoteConfig:
    """Tunable parameters of the quote engine.

    Attributes:
        clmm_sanity_ceiling_divisor: A CLMM single-range quote whose output
            exceeds ``liquidity // divisor`` is rejected as unreliable. The
            single-range model cannot represent trades that cross ticks, so
            large outputs are extrapolation rather than estimate. A full
            tick-walking simulation would derive this bound from the pool's
            initialized ticks instead.
        default_slippage_bps: Slippage tolerance used when the caller does not
            supply one (50 = 0.5%).
        caution_impact_percent: Price impact at which the UI should caution.
        warning_impact_percent: Price impact at which the UI should warn.
    """

    clmm_sanity_ceiling_divisor: int = 4
    default_slippage_bps: int = 50
    caution_impact_percent: float = 1.0
    warning_impact_percent: float = 5.0


@dataclass(frozen=True)
class HistoryConfig:
    """Retention and deduplication rules for local time series.

    Attributes:
        max_points: Maximum points kept per pair (oldest dropped first)
        max_age_seconds: Points older than this are purged by the sweep
        min_interval_seconds: A point is always recorded once this much time
            has passed since the previous one
        min_change_ratio: Within min_interval_seconds, a point is recorded only
            if the price moved at least this much (0.001 = 0.1%)
        sweep_interval_seconds: Minimum wall-clock gap between purge sweeps
        stats_window_seconds: Window for 24h statistics
    """

    max_points: int = 100
    max_age_seconds: float = 24 * 60 * 60
    min_interval_seconds: float = 30.0
    min_change_ratio: float = 0.001
    sweep_interval_seconds: float = 60 * 60
    stats_window_seconds: float = 24 * 60 * 60


DEFAULT_QUOTE_CONFIG = QuoteConfig()
DEFAULT_HISTORY_CONFIG = HistoryConfig()
