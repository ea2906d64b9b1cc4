"""Tests for realm query response parsing."""

from gnomo.rpc import (
    parse_clmm_pool,
    parse_id_list,
    parse_int_result,
    parse_position,
    parse_query_tuple,
    parse_v2_pool,
)
from tests.helpers import OWNER, UGNOT, USDC

V2_POOL_RESPONSE = "\n".join(
    [
        '("ugnot" string)',
        '("gno.land/r/demo/usdc" string)',
        "(1000000 uint64)",
        "(2000000 uint64)",
        "(1414213 uint64)",
        "(30 uint64)",
    ]
)

CLMM_POOL_RESPONSE = "\n".join(
    [
        '("ugnot" string)',
        '("gno.land/r/demo/usdc" string)',
        "(1500000 uint64)",
        "(41 int32)",
        "(2000000 uint64)",
        "(30 uint64)",
        "(10 int32)",
    ]
)


class TestParseQueryTuple:
    """Tests for both tuple layouts."""

    def test_single_line(self):
        response = '("ugnot" string, "gno.land/r/demo/usdc" string, 1000000 int64, -20 int32)'
        assert parse_query_tuple(response) == ["ugnot", USDC, "1000000", "-20"]

    def test_multi_line(self):
        assert parse_query_tuple(CLMM_POOL_RESPONSE) == [
            UGNOT,
            USDC,
            "1500000",
            "41",
            "2000000",
            "30",
            "10",
        ]

    def test_commas_inside_quotes(self):
        assert parse_query_tuple('("a,b" string, 5 int)') == ["a,b", "5"]

    def test_empty(self):
        assert parse_query_tuple("()") == []
        assert parse_query_tuple("") == []

    def test_single_value(self):
        assert parse_query_tuple("(3 int)") == ["3"]


class TestParseRecords:
    """Tests for pool and position records."""

    def test_v2_pool(self):
        pool = parse_v2_pool(V2_POOL_RESPONSE, 4)
        assert pool.id == 4
        assert (pool.denom_a, pool.denom_b) == (UGNOT, USDC)
        assert (pool.reserve_a, pool.reserve_b) == (1_000_000, 2_000_000)
        assert pool.total_lp == 1_414_213
        assert pool.fee_bps == 30

    def test_v2_pool_single_line(self):
        response = '("ugnot" string, "foo" string, 10 uint64, 20 uint64, 14 uint64, 25 uint64)'
        pool = parse_v2_pool(response, 0)
        assert (pool.reserve_a, pool.reserve_b, pool.fee_bps) == (10, 20, 25)

    def test_v2_pool_malformed(self):
        assert parse_v2_pool('("ugnot" string)\n(5 uint64)', 0) is None

    def test_v2_pool_inconsistent(self):
        """Records that break pool invariants are rejected."""
        response = V2_POOL_RESPONSE.replace("(1414213 uint64)", "(0 uint64)")
        assert parse_v2_pool(response, 0) is None

    def test_clmm_pool(self):
        pool = parse_clmm_pool(CLMM_POOL_RESPONSE, 2)
        assert pool.id == 2
        assert pool.price_x6 == 1_500_000
        assert pool.current_tick == 41
        assert pool.liquidity == 2_000_000
        assert pool.fee_bps == 30
        assert pool.tick_spacing == 10

    def test_clmm_pool_single_line(self):
        response = '("ugnot" string, "foo" string, 951466 uint64, -5 int32, 100 uint64, 30 uint64, 10 int32)'
        pool = parse_clmm_pool(response, 0)
        assert pool.current_tick == -5

    def test_clmm_pool_tick_mismatch(self):
        """A tick inconsistent with the price fails the pool invariants."""
        response = CLMM_POOL_RESPONSE.replace("(41 int32)", "(-300 int32)")
        assert parse_clmm_pool(response, 0) is None

    def test_clmm_pool_short(self):
        assert parse_clmm_pool('("ugnot" string, "foo" string)', 0) is None

    def test_clmm_pool_non_numeric(self):
        response = CLMM_POOL_RESPONSE.replace("(1500000 uint64)", '("oops" string)')
        assert parse_clmm_pool(response, 0) is None

    def test_position(self):
        response = f'(0 uint64, "{OWNER}" string, -100 int32, 100 int32, 5000 uint64)'
        position = parse_position(response, 7)
        assert position.id == 7
        assert position.pool_id == 0
        assert position.owner == OWNER
        assert (position.tick_lower, position.tick_upper) == (-100, 100)
        assert position.liquidity == 5_000

    def test_position_malformed(self):
        assert parse_position("(nil)", 1) is None


class TestParseScalars:
    def test_int_result(self):
        assert parse_int_result("(3 int)") == 3
        assert parse_int_result("(-4 int64)") == -4
        assert parse_int_result("garbage") is None

    def test_id_list(self):
        assert parse_id_list("(slice[(1 uint64),(4 uint64),(12 uint64)] []uint64)") == [1, 4, 12]

    def test_id_list_nil(self):
        assert parse_id_list("(nil []uint64)") == []
        assert parse_id_list("") == []
