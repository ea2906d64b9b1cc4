"""Pool type definitions.

Provides the AnyPool union and the immutable snapshot the engine reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from gnomo.amm.clmm import CLMMPool, CLMMPosition
from gnomo.amm.v2 import V2Pool

# Union type for all pool types
AnyPool: TypeAlias = V2Pool | CLMMPool


@dataclass(frozen=True)
class PoolSnapshot:
    """Pool state captured by one refresh, shared read-only by quote computations."""

    v2_pools: tuple[V2Pool, ...] = ()
    clmm_pools: tuple[CLMMPool, ...] = ()
    positions: tuple[CLMMPosition, ...] = field(default=())

    def get_clmm_pool(self, pool_id: int) -> CLMMPool | None:
        return next((p for p in self.clmm_pools if p.id == pool_id), None)

    def get_position(self, position_id: int) -> CLMMPosition | None:
        return next((p for p in self.positions if p.id == position_id), None)


__all__ = ["AnyPool", "PoolSnapshot", "V2Pool", "CLMMPool", "CLMMPosition"]
