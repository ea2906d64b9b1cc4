"""Concentrated liquidity (CLMM) pool support.

- Pool and position snapshots (CLMMPool, CLMMPosition)
- Single-range swap estimates with a sanity ceiling (CLMMQuoteCalculator)
- Position composition and range checks (liquidity module)
"""

from .liquidity import (
    PositionAmounts,
    amounts_for_liquidity,
    is_in_range,
    position_value,
    required_counter_amount,
    validate_range,
)
from .pool import CLMMPool, CLMMPosition
from .quoter import CLMMQuoteCalculator, clmm_calculator, sqrt_price_scaled

__all__ = [
    # Pool
    "CLMMPool",
    "CLMMPosition",
    # Quoter
    "CLMMQuoteCalculator",
    "clmm_calculator",
    "sqrt_price_scaled",
    # Liquidity
    "PositionAmounts",
    "amounts_for_liquidity",
    "is_in_range",
    "position_value",
    "required_counter_amount",
    "validate_range",
]
