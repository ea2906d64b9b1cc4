"""Parsing of realm query responses into pool and position records.

Query results come back as rendered Go tuples, in one of two layouts:

    ("ugnot" string, "gno.land/r/demo/usdc" string, 1000000 int64)

or one value per line:

    ("ugnot" string)
    (1000000 int64)

Parsers return None (and log a warning) for malformed responses instead of
raising, so one bad pool never breaks a refresh.
"""

from __future__ import annotations

import re

import structlog

from gnomo.amm.clmm import CLMMPool, CLMMPosition
from gnomo.amm.v2 import V2Pool

logger = structlog.get_logger()

_LINE_QUOTED = re.compile(r'\("([^"]*)"\s+[\w\[\]]+\)')
_LINE_NUMBER = re.compile(r"\((-?\d+)\s+[\w\[\]]+\)")
_PART_QUOTED = re.compile(r'^"([^"]*)"')
_PART_NUMBER = re.compile(r"^(-?\d+)")
_SLICE = re.compile(r"slice\[([^\]]*)\]")
_LEADING_INT = re.compile(r"\(\s*(-?\d+)")


def _split_top_level(inner: str) -> list[str]:
    """Split on commas outside quotes and nested parentheses."""
    parts: list[str] = []
    current: list[str] = []
    in_quote = False
    depth = 0
    for char in inner:
        if char == '"' and depth == 0:
            in_quote = not in_quote
        elif char == "(" and not in_quote:
            depth += 1
        elif char == ")" and not in_quote:
            depth -= 1
        elif char == "," and not in_quote and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(char)
    if current:
        parts.append("".join(current).strip())
    return parts


def parse_query_tuple(response: str) -> list[str]:
    """Extract the values of a rendered Go tuple, without type annotations.

    Args:
        response: Raw query result in either layout

    Returns:
        Values as strings (quotes stripped), in order. Empty for an empty tuple.
    """
    lines = [line for line in response.strip().splitlines() if line.strip()]

    if len(lines) > 1:
        values = []
        for line in lines:
            match = _LINE_QUOTED.search(line) or _LINE_NUMBER.search(line)
            if match:
                values.append(match.group(1))
        return values

    inner = response.strip()
    if inner.startswith("("):
        inner = inner[1:]
    if inner.endswith(")"):
        inner = inner[:-1]
    inner = inner.strip()
    if not inner:
        return []

    values = []
    for part in _split_top_level(inner):
        match = _PART_QUOTED.match(part) or _PART_NUMBER.match(part)
        values.append(match.group(1) if match else part)
    return values


def parse_int_result(response: str) -> int | None:
    """First integer in a single-value result such as "(3 int)"."""
    match = _LEADING_INT.search(response)
    if match is None:
        logger.warning("rpc_int_unparseable", response=response[:200])
        return None
    return int(match.group(1))


def parse_v2_pool(response: str, pool_id: int) -> V2Pool | None:
    """Parse a GetPool result: denom_a, denom_b, reserve_a, reserve_b, total_lp, fee_bps."""
    values = parse_query_tuple(response)
    if len(values) < 6:
        logger.warning("rpc_v2_pool_malformed", pool_id=pool_id, values=len(values))
        return None

    try:
        return V2Pool(
            id=pool_id,
            denom_a=values[0],
            denom_b=values[1],
            reserve_a=int(values[2]),
            reserve_b=int(values[3]),
            total_lp=int(values[4]),
            fee_bps=int(values[5]),
        )
    except ValueError as e:
        logger.warning("rpc_v2_pool_invalid", pool_id=pool_id, error=str(e))
        return None


def parse_clmm_pool(response: str, pool_id: int) -> CLMMPool | None:
    """Parse a GetCLMMPool result.

    Fields: denom_a, denom_b, price_x6, current_tick, liquidity, fee_bps,
    tick_spacing.
    """
    values = parse_query_tuple(response)
    if len(values) < 7:
        logger.warning("rpc_clmm_pool_malformed", pool_id=pool_id, values=len(values))
        return None

    try:
        return CLMMPool(
            id=pool_id,
            denom_a=values[0],
            denom_b=values[1],
            price_x6=int(values[2]),
            current_tick=int(values[3]),
            liquidity=int(values[4]),
            fee_bps=int(values[5]),
            tick_spacing=int(values[6]),
        )
    except ValueError as e:
        logger.warning("rpc_clmm_pool_invalid", pool_id=pool_id, error=str(e))
        return None


def parse_position(response: str, position_id: int) -> CLMMPosition | None:
    """Parse a GetPosition result: pool_id, owner, tick_lower, tick_upper, liquidity."""
    values = parse_query_tuple(response)
    if len(values) < 5:
        logger.warning("rpc_position_malformed", position_id=position_id, values=len(values))
        return None

    try:
        return CLMMPosition(
            id=position_id,
            pool_id=int(values[0]),
            owner=values[1],
            tick_lower=int(values[2]),
            tick_upper=int(values[3]),
            liquidity=int(values[4]),
        )
    except ValueError as e:
        logger.warning("rpc_position_invalid", position_id=position_id, error=str(e))
        return None


def parse_id_list(response: str) -> list[int]:
    """Parse a []uint64 result, "(slice[(1 uint64),(2 uint64)] []uint64)" or "(nil []uint64)"."""
    if "nil" in response:
        return []
    match = _SLICE.search(response)
    if match is None:
        return []
    # Drop the element type annotations before collecting the numbers
    body = re.sub(r"u?int(?:64|32)?", "", match.group(1))
    return [int(n) for n in re.findall(r"\d+", body)]


__all__ = [
    "parse_clmm_pool",
    "parse_id_list",
    "parse_int_result",
    "parse_position",
    "parse_query_tuple",
    "parse_v2_pool",
]
