"""Shared field types for API models.

Amounts arrive from wallets and chain queries in several shapes: plain
integers, decimal strings, coin strings with a denom suffix ("1000ugnot")
and objects with an ``amount`` field. They are normalized to ``int`` here,
once, so the engine only ever sees integers.
"""

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field, PlainSerializer

_LEADING_INT = re.compile(r"^\s*(-?\d+)")


def coerce_amount(value: Any) -> int:
    """Normalize an amount to a non-negative int in the token's smallest unit.

    Args:
        value: int, decimal or coin string, or a mapping with "amount"/"Amount"

    Returns:
        The amount as int

    Raises:
        ValueError: If value has no leading integer or is negative
    """
    if isinstance(value, dict):
        value = value.get("amount", value.get("Amount"))

    if isinstance(value, bool):
        raise ValueError("Amount must be an integer, got bool")

    if isinstance(value, int):
        amount = value
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            raise ValueError(f"Amount must start with an integer: '{value}'")
        amount = int(match.group(1))
    else:
        raise ValueError(f"Amount must be int or string, got {type(value).__name__}")

    if amount < 0:
        raise ValueError(f"Amount cannot be negative: {amount}")
    return amount


def coerce_denom(value: Any) -> str:
    """Accept a denom string or a mapping with "denom"/"Denom"."""
    if isinstance(value, dict):
        value = value.get("denom", value.get("Denom"))
    if not isinstance(value, str):
        raise ValueError(f"Denom must be a string, got {type(value).__name__}")
    return value


# Token amount in smallest unit; serialized as a decimal string so large
# values survive JSON clients with float numbers
Amount = Annotated[
    int,
    BeforeValidator(coerce_amount),
    PlainSerializer(str, return_type=str),
    Field(description="Token amount in smallest unit"),
]

# Token denomination, e.g. "ugnot" or "gno.land/r/demo/usdc"
Denom = Annotated[str, BeforeValidator(coerce_denom), Field(min_length=1)]

# Basis points, 0..10000
Bps = Annotated[int, Field(ge=0, le=10_000)]


__all__ = ["Amount", "Bps", "Denom", "coerce_amount", "coerce_denom"]
