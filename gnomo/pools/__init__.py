"""Pool management package.

Provides PoolRegistry for looking up pools of both kinds by token pair.
"""

from .registry import PoolRegistry
from .types import AnyPool, CLMMPool, PoolSnapshot, V2Pool

__all__ = [
    "PoolRegistry",
    "PoolSnapshot",
    "AnyPool",
    "V2Pool",
    "CLMMPool",
]
