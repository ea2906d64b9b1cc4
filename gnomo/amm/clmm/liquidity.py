"""Position composition for concentrated liquidity.

A position with liquidity L over [price_lower, price_upper] holds, at the
current price P:

- P <= price_lower: only A, L * (price_upper - price_lower) / (price_lower * price_upper)
- P >= price_upper: only B, L * (price_upper - price_lower)
- otherwise: A = L * (sqrt(pu) - sqrt(P)) / (sqrt(P) * sqrt(pu)),
             B = L * (sqrt(P) - sqrt(pl))

These are display estimates (float math, truncated to whole units); nothing
here feeds a minimum-received figure.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from gnomo.amm.base import TokenSide
from gnomo.errors import InvalidPrice, InvalidRange
from gnomo.math.ticks import check_tick, tick_to_price

from .pool import CLMMPosition


@dataclass(frozen=True)
class PositionAmounts:
    """Token amounts a position currently represents."""

    amount_a: int
    amount_b: int


def validate_range(tick_lower: int, tick_upper: int, tick_spacing: int | None = None) -> None:
    """Check that a tick range can bound a position.

    Raises:
        InvalidRange: If tick_lower >= tick_upper or a bound is not a multiple
            of tick_spacing
        TickOutOfRange: If a bound is outside the supported tick range
    """
    if tick_lower >= tick_upper:
        raise InvalidRange(f"tick_lower {tick_lower} must be below tick_upper {tick_upper}")
    check_tick(tick_lower)
    check_tick(tick_upper)
    if tick_spacing is not None:
        if tick_spacing <= 0:
            raise InvalidRange(f"Tick spacing must be positive, got {tick_spacing}")
        if tick_lower % tick_spacing or tick_upper % tick_spacing:
            raise InvalidRange(
                f"Ticks [{tick_lower}, {tick_upper}] must align to spacing {tick_spacing}"
            )


def is_in_range(position: CLMMPosition, current_tick: int) -> bool:
    """True while the position earns fees: tick_lower <= current_tick < tick_upper."""
    return position.tick_lower <= current_tick < position.tick_upper


def amounts_for_liquidity(
    liquidity: int,
    price_lower: float,
    price_upper: float,
    current_price: float,
) -> PositionAmounts:
    """Split liquidity over [price_lower, price_upper] into token amounts.

    Raises:
        InvalidPrice: If any price is not positive
        InvalidRange: If price_lower >= price_upper
    """
    for price in (price_lower, price_upper, current_price):
        if not math.isfinite(price) or price <= 0:
            raise InvalidPrice(f"Prices must be positive and finite, got {price}")
    if price_lower >= price_upper:
        raise InvalidRange(f"price_lower {price_lower} must be below price_upper {price_upper}")

    if current_price <= price_lower:
        amount_a = liquidity * (price_upper - price_lower) / (price_lower * price_upper)
        return PositionAmounts(amount_a=int(amount_a), amount_b=0)

    if current_price >= price_upper:
        amount_b = liquidity * (price_upper - price_lower)
        return PositionAmounts(amount_a=0, amount_b=int(amount_b))

    sqrt_lower = math.sqrt(price_lower)
    sqrt_upper = math.sqrt(price_upper)
    sqrt_current = math.sqrt(current_price)
    amount_a = liquidity * (sqrt_upper - sqrt_current) / (sqrt_current * sqrt_upper)
    amount_b = liquidity * (sqrt_current - sqrt_lower)
    return PositionAmounts(amount_a=int(amount_a), amount_b=int(amount_b))


def position_value(position: CLMMPosition, current_price: float) -> PositionAmounts:
    """Token amounts held by a position at the pool's current price.

    Raises:
        InvalidRange: If the position's ticks are misordered
        InvalidPrice: If current_price is not positive
    """
    validate_range(position.tick_lower, position.tick_upper)
    return amounts_for_liquidity(
        position.liquidity,
        tick_to_price(position.tick_lower),
        tick_to_price(position.tick_upper),
        current_price,
    )


def required_counter_amount(
    tick_lower: int,
    tick_upper: int,
    current_price: float,
    amount: int,
    token_in: TokenSide,
    tick_spacing: int | None = None,
) -> int | None:
    """Amount of the other token needed alongside a single-sided deposit.

    Derives the liquidity implied by `amount` of the token_in side and
    returns how much of the other side that liquidity needs at the current
    price.

    Returns:
        The counter amount; 0 when the range holds only the supplied token;
        None when the user must enter both sides manually (invalid or
        misaligned range, or a range that holds none of the supplied token).

    Raises:
        InvalidPrice: If current_price is not positive
    """
    if not math.isfinite(current_price) or current_price <= 0:
        raise InvalidPrice(f"current_price must be positive and finite, got {current_price}")
    if amount <= 0:
        return 0

    try:
        validate_range(tick_lower, tick_upper, tick_spacing)
    except ValueError:
        return None

    sqrt_lower = math.sqrt(tick_to_price(tick_lower))
    sqrt_upper = math.sqrt(tick_to_price(tick_upper))
    sqrt_current = math.sqrt(current_price)

    if sqrt_current <= sqrt_lower:
        # Range above the price holds only A
        return 0 if token_in == "A" else None
    if sqrt_current >= sqrt_upper:
        # Range below the price holds only B
        return 0 if token_in == "B" else None

    if token_in == "A":
        liquidity = amount * sqrt_current * sqrt_upper / (sqrt_upper - sqrt_current)
        return int(liquidity * (sqrt_current - sqrt_lower))

    liquidity = amount / (sqrt_current - sqrt_lower)
    return int(liquidity * (sqrt_upper - sqrt_current) / (sqrt_current * sqrt_upper))


__all__ = [
    "PositionAmounts",
    "amounts_for_liquidity",
    "is_in_range",
    "position_value",
    "required_counter_amount",
    "validate_range",
]
