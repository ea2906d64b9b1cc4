"""Shared definitions for pool implementations."""

from enum import Enum
from typing import Literal, TypeAlias

# Which side of a pool the input token is on
TokenSide: TypeAlias = Literal["A", "B"]


class PoolKind(str, Enum):
    """Pool implementation a quote came from."""

    V2 = "v2"
    CLMM = "clmm"


def canonical_pair(denom_x: str, denom_y: str) -> tuple[str, str]:
    """Order two denoms lexically so (x, y) and (y, x) share one key."""
    return (denom_x, denom_y) if denom_x <= denom_y else (denom_y, denom_x)


__all__ = ["PoolKind", "TokenSide", "canonical_pair"]
