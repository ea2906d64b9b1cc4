"""Pool sources: where the engine gets its pool and position snapshots.

The engine never talks to the chain itself. A PoolSource hands it plain
records; QueryPoolSource builds them from realm query results obtained
through an injected callable, so the transport (HTTP ABCI queries, a
fixture file, a test double) stays outside this package.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol

import structlog

from gnomo.amm.clmm import CLMMPool, CLMMPosition
from gnomo.amm.v2 import V2Pool
from gnomo.pools import PoolSnapshot

from .parsing import (
    parse_clmm_pool,
    parse_id_list,
    parse_int_result,
    parse_position,
    parse_v2_pool,
)

logger = structlog.get_logger()

# Evaluates a realm expression such as 'GetPool(0)' and returns the rendered result
QueryFn = Callable[[str], str]


class PoolSource(Protocol):
    """Protocol for pool and position providers."""

    def list_v2_pools(self) -> list[V2Pool]:
        """All V2 pools, in ascending id."""
        ...

    def list_clmm_pools(self) -> list[CLMMPool]:
        """All CLMM pools, in ascending id."""
        ...

    def get_position(self, position_id: int) -> CLMMPosition | None:
        """A single position, or None if it does not exist."""
        ...

    def positions_by_owner(self, owner: str) -> list[CLMMPosition]:
        """Positions held by owner."""
        ...


class StaticPoolSource:
    """In-memory pool source for fixtures, tests and precomputed snapshots."""

    def __init__(
        self,
        v2_pools: Iterable[V2Pool] = (),
        clmm_pools: Iterable[CLMMPool] = (),
        positions: Iterable[CLMMPosition] = (),
    ) -> None:
        self._v2 = sorted(v2_pools, key=lambda p: p.id)
        self._clmm = sorted(clmm_pools, key=lambda p: p.id)
        self._positions = {p.id: p for p in positions}

    def list_v2_pools(self) -> list[V2Pool]:
        return list(self._v2)

    def list_clmm_pools(self) -> list[CLMMPool]:
        return list(self._clmm)

    def get_position(self, position_id: int) -> CLMMPosition | None:
        return self._positions.get(position_id)

    def positions_by_owner(self, owner: str) -> list[CLMMPosition]:
        return sorted(
            (p for p in self._positions.values() if p.owner == owner),
            key=lambda p: p.id,
        )

    def snapshot(self) -> PoolSnapshot:
        return PoolSnapshot(
            v2_pools=tuple(self._v2),
            clmm_pools=tuple(self._clmm),
            positions=tuple(sorted(self._positions.values(), key=lambda p: p.id)),
        )


class QueryPoolSource:
    """Pool source backed by realm queries.

    Pools are enumerated by count then fetched one by one; any pool whose
    response fails to parse is skipped (the parser logs it). Errors raised by
    the query callable propagate to the caller.

    Args:
        query: Evaluates a realm expression and returns the rendered result
    """

    def __init__(self, query: QueryFn) -> None:
        self._query = query

    def _count(self, expr: str) -> int:
        count = parse_int_result(self._query(expr))
        return max(count or 0, 0)

    def list_v2_pools(self) -> list[V2Pool]:
        pools = []
        for pool_id in range(self._count("GetPoolCount()")):
            pool = parse_v2_pool(self._query(f"GetPool({pool_id})"), pool_id)
            if pool is not None:
                pools.append(pool)
        logger.debug("v2_pools_loaded", count=len(pools))
        return pools

    def list_clmm_pools(self) -> list[CLMMPool]:
        pools = []
        for pool_id in range(self._count("GetCLMMPoolCount()")):
            pool = parse_clmm_pool(self._query(f"GetCLMMPool({pool_id})"), pool_id)
            if pool is not None:
                pools.append(pool)
        logger.debug("clmm_pools_loaded", count=len(pools))
        return pools

    def get_position(self, position_id: int) -> CLMMPosition | None:
        return parse_position(self._query(f"GetPosition({position_id})"), position_id)

    def positions_by_owner(self, owner: str) -> list[CLMMPosition]:
        if '"' in owner:
            raise ValueError(f"Invalid owner address: {owner!r}")
        ids = parse_id_list(self._query(f'GetPositionsByOwner("{owner}")'))
        positions = []
        for position_id in ids:
            position = self.get_position(position_id)
            if position is not None:
                positions.append(position)
        return positions

    def snapshot(self) -> PoolSnapshot:
        """Capture all pools (positions are fetched on demand, not snapshotted)."""
        return PoolSnapshot(
            v2_pools=tuple(self.list_v2_pools()),
            clmm_pools=tuple(self.list_clmm_pools()),
        )


__all__ = ["PoolSource", "QueryFn", "QueryPoolSource", "StaticPoolSource"]
