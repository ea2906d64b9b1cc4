"""Pool math for V2 (constant product) and CLMM (concentrated liquidity)."""

from gnomo.amm.base import PoolKind, TokenSide, canonical_pair
from gnomo.amm.clmm import (
    CLMMPool,
    CLMMPosition,
    CLMMQuoteCalculator,
    PositionAmounts,
    clmm_calculator,
    is_in_range,
    position_value,
    required_counter_amount,
)
from gnomo.amm.v2 import V2Pool, V2QuoteCalculator, v2_calculator

__all__ = [
    # Shared
    "PoolKind",
    "TokenSide",
    "canonical_pair",
    # V2
    "V2Pool",
    "V2QuoteCalculator",
    "v2_calculator",
    # CLMM
    "CLMMPool",
    "CLMMPosition",
    "CLMMQuoteCalculator",
    "clmm_calculator",
    "PositionAmounts",
    "position_value",
    "is_in_range",
    "required_counter_amount",
]
