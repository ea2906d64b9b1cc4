"""Pool registry indexed by token pair.

Both pool kinds allow several pools per pair (e.g. different fee tiers), so
each index maps a canonical pair to a list kept in ascending pool id.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable

import structlog

from gnomo.amm.base import canonical_pair
from gnomo.amm.clmm import CLMMPool
from gnomo.amm.v2 import V2Pool
from gnomo.pools.types import AnyPool, PoolSnapshot

logger = structlog.get_logger()


def _insert_by_id(pools: list, pool: AnyPool) -> None:
    """Insert or replace pool in a list sorted by id."""
    ids = [p.id for p in pools]
    index = bisect.bisect_left(ids, pool.id)
    if index < len(pools) and pools[index].id == pool.id:
        pools[index] = pool
    else:
        pools.insert(index, pool)


class PoolRegistry:
    """Registry of V2 and CLMM pools for routing."""

    def __init__(self, pools: Iterable[AnyPool] | None = None) -> None:
        """Initialize the registry with optional pools.

        Args:
            pools: Initial pools of either kind. If None, starts empty.
        """
        self._v2_pools: dict[tuple[str, str], list[V2Pool]] = {}
        self._clmm_pools: dict[tuple[str, str], list[CLMMPool]] = {}

        if pools:
            for pool in pools:
                self.add_any_pool(pool)

    @classmethod
    def from_snapshot(cls, snapshot: PoolSnapshot) -> PoolRegistry:
        return cls([*snapshot.v2_pools, *snapshot.clmm_pools])

    def add_any_pool(self, pool: AnyPool) -> None:
        """Add a pool of either kind.

        Raises:
            TypeError: If pool type is not supported
        """
        if isinstance(pool, V2Pool):
            self.add_v2_pool(pool)
        elif isinstance(pool, CLMMPool):
            self.add_clmm_pool(pool)
        else:
            raise TypeError(f"Unknown pool type: {type(pool)}")

    def add_v2_pool(self, pool: V2Pool) -> None:
        """Add a V2 pool. A pool with the same id and pair is replaced."""
        if pool.denom_a == pool.denom_b:
            logger.warning("pool_same_denoms", pool_id=pool.id, denom=pool.denom_a)
            return
        key = canonical_pair(pool.denom_a, pool.denom_b)
        _insert_by_id(self._v2_pools.setdefault(key, []), pool)

    def add_clmm_pool(self, pool: CLMMPool) -> None:
        """Add a CLMM pool. A pool with the same id and pair is replaced."""
        if pool.denom_a == pool.denom_b:
            logger.warning("pool_same_denoms", pool_id=pool.id, denom=pool.denom_a)
            return
        key = canonical_pair(pool.denom_a, pool.denom_b)
        _insert_by_id(self._clmm_pools.setdefault(key, []), pool)

    def get_v2_pools(self, denom_x: str, denom_y: str) -> list[V2Pool]:
        """All V2 pools for a pair (order independent), ascending id."""
        return list(self._v2_pools.get(canonical_pair(denom_x, denom_y), []))

    def get_clmm_pools(self, denom_x: str, denom_y: str) -> list[CLMMPool]:
        """All CLMM pools for a pair (order independent), ascending id."""
        return list(self._clmm_pools.get(canonical_pair(denom_x, denom_y), []))

    def get_pools_for_pair(self, denom_x: str, denom_y: str) -> list[AnyPool]:
        """V2 pools then CLMM pools for a pair, each in ascending id."""
        return [*self.get_v2_pools(denom_x, denom_y), *self.get_clmm_pools(denom_x, denom_y)]

    @property
    def pool_count(self) -> int:
        return sum(len(p) for p in self._v2_pools.values()) + sum(
            len(p) for p in self._clmm_pools.values()
        )

    @property
    def pairs(self) -> set[tuple[str, str]]:
        """Canonical pairs with at least one pool."""
        return set(self._v2_pools) | set(self._clmm_pools)


__all__ = ["PoolRegistry"]
