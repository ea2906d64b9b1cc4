"""Boundary between realm query results and the engine's pool records."""

from .parsing import (
    parse_clmm_pool,
    parse_id_list,
    parse_int_result,
    parse_position,
    parse_query_tuple,
    parse_v2_pool,
)
from .source import PoolSource, QueryFn, QueryPoolSource, StaticPoolSource

__all__ = [
    "PoolSource",
    "QueryFn",
    "QueryPoolSource",
    "StaticPoolSource",
    "parse_clmm_pool",
    "parse_id_list",
    "parse_int_result",
    "parse_position",
    "parse_query_tuple",
    "parse_v2_pool",
]
