"""Tests for best single-pool route selection."""

import pytest

from gnomo.amm.base import PoolKind
from gnomo.amm.clmm import CLMMQuoteCalculator
from gnomo.config import QuoteConfig
from gnomo.errors import QuoteUnavailable
from gnomo.pools import PoolRegistry
from gnomo.routing import RouteSelector, best_quote, route_selector
from tests.helpers import FOO, UGNOT, USDC, make_clmm_pool, make_v2_pool


class TestBestQuote:
    """Tests for pool selection."""

    def test_clmm_wins_with_deeper_liquidity(self):
        """A V2 pool (500k/500k) loses to a CLMM pool with 2M active liquidity."""
        v2 = make_v2_pool(pool_id=0, reserve_a=500_000, reserve_b=500_000)
        clmm = make_clmm_pool(pool_id=0, price_x6=1_000_000, liquidity=2_000_000, current_tick=0)

        quotes = route_selector.quote_all(UGNOT, USDC, 1_000, [v2], [clmm])
        assert [q.amount_out for q in quotes] == [995, 996]

        quote = best_quote(UGNOT, USDC, 1_000, [v2], [clmm])
        assert quote is not None
        assert quote.pool_kind is PoolKind.CLMM
        assert quote.pool is clmm
        assert quote.token_in == "A"
        assert quote.amount_in == 1_000
        assert quote.amount_out == 996

    def test_larger_output_wins(self):
        shallow = make_v2_pool(pool_id=0, reserve_a=100_000, reserve_b=100_000)
        deep = make_v2_pool(pool_id=1, reserve_a=10_000_000, reserve_b=10_000_000)
        quote = best_quote(UGNOT, USDC, 1_000, [shallow, deep], [])
        assert quote.pool_id == 1

    def test_tie_keeps_lowest_id(self):
        """Equal outputs resolve to the first pool in ascending id."""
        pools = [make_v2_pool(pool_id=3), make_v2_pool(pool_id=1), make_v2_pool(pool_id=2)]
        quote = best_quote(UGNOT, USDC, 1_000, pools, [])
        assert quote.pool_id == 1

    def test_tie_prefers_v2_over_clmm(self):
        """V2 pools are evaluated before CLMM pools, so V2 keeps a tie."""
        v2 = make_v2_pool(pool_id=5, reserve_a=1_000_000, reserve_b=1_000_000)
        clmm = make_clmm_pool(pool_id=0, price_x6=1_000_000, liquidity=1_000_000)
        quote = best_quote(UGNOT, USDC, 1_000, [v2], [clmm])
        assert quote.amount_out == 996
        assert quote.pool_kind is PoolKind.V2

    def test_selling_token_b(self):
        """Direction is taken from which side the input denom is on."""
        pool = make_v2_pool(reserve_a=1_000_000, reserve_b=2_000_000)
        quote = best_quote(USDC, UGNOT, 10_000, [pool], [])
        assert quote.token_in == "B"
        assert quote.denom_in == USDC
        assert quote.denom_out == UGNOT

    def test_pool_stored_in_reverse_order_matches(self):
        pool = make_v2_pool(denom_a=USDC, denom_b=UGNOT)
        quote = best_quote(UGNOT, USDC, 1_000, [pool], [])
        assert quote.token_in == "B"

    def test_other_pairs_ignored(self):
        other = make_v2_pool(pool_id=0, denom_b=FOO, reserve_a=10**9, reserve_b=10**9)
        target = make_v2_pool(pool_id=1)
        quote = best_quote(UGNOT, USDC, 1_000, [other, target], [])
        assert quote.pool_id == 1

    def test_empty_pools_skipped(self):
        empty_v2 = make_v2_pool(pool_id=0, reserve_a=0, reserve_b=0)
        empty_clmm = make_clmm_pool(pool_id=0, liquidity=0)
        assert best_quote(UGNOT, USDC, 1_000, [empty_v2], [empty_clmm]) is None

    def test_no_pools(self):
        assert best_quote(UGNOT, USDC, 1_000, [], []) is None

    def test_non_positive_amount(self):
        assert best_quote(UGNOT, USDC, 0, [make_v2_pool()], []) is None

    def test_same_denom(self):
        assert best_quote(UGNOT, UGNOT, 1_000, [make_v2_pool()], []) is None

    def test_zero_output_dropped(self):
        """A trade too small to produce output is not a route."""
        pool = make_v2_pool(reserve_a=1_000_000, reserve_b=1_000)
        assert best_quote(UGNOT, USDC, 1, [pool], []) is None

    def test_unreliable_clmm_excluded(self):
        """A CLMM estimate past its ceiling drops out and a V2 pool wins."""
        v2 = make_v2_pool(pool_id=0, reserve_a=1_000_000, reserve_b=1_000_000)
        clmm = make_clmm_pool(pool_id=0, liquidity=1_000_000)
        quote = best_quote(UGNOT, USDC, 500_000, [v2], [clmm])
        assert quote.pool_kind is PoolKind.V2

    def test_custom_clmm_calculator(self):
        """The selector uses the CLMM calculator it is given."""
        strict = RouteSelector(
            clmm_calculator=CLMMQuoteCalculator(QuoteConfig(clmm_sanity_ceiling_divisor=10_000))
        )
        clmm = make_clmm_pool(liquidity=2_000_000)
        assert strict.best_quote(UGNOT, USDC, 1_000, [], [clmm]) is None
        assert route_selector.best_quote(UGNOT, USDC, 1_000, [], [clmm]) is not None


class TestRequireQuote:
    """Tests for the raising variant and registry lookup."""

    def test_require_quote_raises(self):
        with pytest.raises(QuoteUnavailable):
            route_selector.require_quote(UGNOT, USDC, 1_000, [], [])

    def test_require_quote_returns(self):
        quote = route_selector.require_quote(UGNOT, USDC, 1_000, [make_v2_pool()], [])
        assert quote.amount_out > 0

    def test_best_quote_from_registry(self):
        registry = PoolRegistry(
            [
                make_v2_pool(pool_id=0, reserve_a=500_000, reserve_b=500_000),
                make_clmm_pool(pool_id=0, liquidity=2_000_000),
            ]
        )
        quote = route_selector.best_quote_from_registry(registry, UGNOT, USDC, 1_000)
        assert quote.pool_kind is PoolKind.CLMM
        assert quote.amount_out == 996
