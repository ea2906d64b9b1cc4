"""Mathematical utilities for the quote engine.

- ticks: tick <-> price conversion and tick-spacing alignment
"""

from gnomo.math.ticks import (
    align_tick,
    price_to_tick,
    price_x6_to_float,
    price_x6_to_tick,
    tick_to_percentage,
    tick_to_price,
    tick_to_price_x6,
)

__all__ = [
    "align_tick",
    "price_to_tick",
    "price_x6_to_float",
    "price_x6_to_tick",
    "tick_to_percentage",
    "tick_to_price",
    "tick_to_price_x6",
]
