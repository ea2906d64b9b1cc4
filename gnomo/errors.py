"""Engine error classes.

Routine degenerate states (empty pools, no matching pair) are reported with
sentinels (zero output, ``None`` quote). These exceptions are reserved for
inputs that indicate a caller bug or an estimate the engine cannot stand by.
"""


class EngineError(Exception):
    """Base error for quote engine operations."""

    pass


class InvalidPrice(EngineError, ValueError):
    """Price input must be positive and finite."""

    pass


class TickOutOfRange(EngineError, ValueError):
    """Tick lies outside [MIN_TICK, MAX_TICK]."""

    pass


class InvalidRange(EngineError, ValueError):
    """Position range is misordered or not aligned to the pool's tick spacing."""

    pass


class QuoteUnavailable(EngineError):
    """No pool trades the pair, or every candidate quote was degenerate."""

    pass


class UnreliableExtrapolation(EngineError):
    """CLMM single-range estimate exceeded its sanity ceiling."""

    pass
