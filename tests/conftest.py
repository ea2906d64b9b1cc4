"""Pytest configuration and fixtures."""

import pytest


class FakeClock:
    """Manually advanced clock for history tests."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """A clock starting at a fixed epoch time."""
    return FakeClock()
