"""Tick and price conversion for concentrated liquidity pools.

Each tick is a fixed 1% price step:

    price(tick) = base_price * 1.01 ** tick
    tick(price) = round(ln(price / base_price) / ln(1.01))

The two are inverses only up to rounding; a price converted to a tick and
back may move by up to one tick (~1%). Prices here are floats and are meant
for display and range selection. On-chain prices use the 1e6 fixed-point
scale (priceX6) and have their own helpers below.
"""

from __future__ import annotations

import math

from gnomo.constants import MAX_TICK, MIN_TICK, PRICE_SCALE, TICK_BASE
from gnomo.errors import InvalidPrice, InvalidRange, TickOutOfRange

_LN_TICK_BASE = math.log(TICK_BASE)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's round() rounds halves to even, which would snap a tick exactly
    halfway between two spacing multiples downward half of the time.
    """
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def check_tick(tick: int) -> int:
    """Return tick unchanged if it lies in [MIN_TICK, MAX_TICK].

    Raises:
        TickOutOfRange: If tick is outside the supported range
    """
    if tick < MIN_TICK or tick > MAX_TICK:
        raise TickOutOfRange(f"Tick {tick} outside [{MIN_TICK}, {MAX_TICK}]")
    return tick


def _check_price(price: float, name: str = "price") -> None:
    if not math.isfinite(price) or price <= 0:
        raise InvalidPrice(f"{name} must be positive and finite, got {price}")


def tick_to_price(tick: int, base_price: float = 1.0) -> float:
    """Convert a tick to a price.

    Args:
        tick: Tick index in [MIN_TICK, MAX_TICK]
        base_price: Price at tick 0

    Returns:
        base_price * 1.01 ** tick

    Raises:
        TickOutOfRange: If tick is outside the supported range
        InvalidPrice: If base_price is not positive
    """
    check_tick(tick)
    _check_price(base_price, "base_price")
    return base_price * TICK_BASE**tick


def price_to_tick(price: float, base_price: float = 1.0) -> int:
    """Convert a price to the nearest tick.

    Raises:
        InvalidPrice: If price or base_price is not positive
        TickOutOfRange: If the nearest tick is outside the supported range
    """
    _check_price(price)
    _check_price(base_price, "base_price")
    return check_tick(round_half_away(math.log(price / base_price) / _LN_TICK_BASE))


def align_tick(tick: int, spacing: int) -> int:
    """Snap a tick to the nearest multiple of the pool's tick spacing.

    Raises:
        InvalidRange: If spacing is not positive
    """
    if spacing <= 0:
        raise InvalidRange(f"Tick spacing must be positive, got {spacing}")
    return round_half_away(tick / spacing) * spacing


def tick_to_price_x6(tick: int) -> int:
    """Price at tick on the 1e6 fixed-point scale."""
    return round_half_away(tick_to_price(tick) * PRICE_SCALE)


def price_x6_to_float(price_x6: int) -> float:
    """Convert a 1e6 fixed-point price to a float."""
    return price_x6 / PRICE_SCALE


def price_x6_to_tick(price_x6: int) -> int:
    """Nearest tick for a 1e6 fixed-point price.

    Raises:
        InvalidPrice: If price_x6 is not positive
    """
    if price_x6 <= 0:
        raise InvalidPrice(f"price_x6 must be positive, got {price_x6}")
    return price_to_tick(price_x6_to_float(price_x6))


def tick_to_percentage(tick: int) -> str:
    """Describe a tick as a signed percentage move from tick 0.

    Examples: 0 -> "0%", 10 -> "+10.5%", -10 -> "-9.5%"
    """
    if tick == 0:
        return "0%"
    pct = (tick_to_price(tick) - 1) * 100
    return f"+{pct:.1f}%" if pct >= 0 else f"{pct:.1f}%"


__all__ = [
    "align_tick",
    "check_tick",
    "price_to_tick",
    "price_x6_to_float",
    "price_x6_to_tick",
    "round_half_away",
    "tick_to_percentage",
    "tick_to_price",
    "tick_to_price_x6",
]
