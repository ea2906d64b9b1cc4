"""Tests for minimum received, trading fee and price impact."""

import pytest

from gnomo.amm.base import PoolKind
from gnomo.config import QuoteConfig
from gnomo.routing import best_quote
from gnomo.routing.types import Quote
from gnomo.slippage import (
    ImpactSeverity,
    SlippageGuard,
    minimum_received,
    slippage_guard,
    trading_fee,
)
from tests.helpers import UGNOT, USDC, make_clmm_pool, make_v2_pool


def v2_quote(amount_in: int, reserve: int = 1_000_000) -> Quote:
    pool = make_v2_pool(reserve_a=reserve, reserve_b=reserve)
    return best_quote(UGNOT, USDC, amount_in, [pool], [])


class TestMinimumReceived:
    """Tests for the slippage floor."""

    def test_half_percent(self):
        assert minimum_received(1_000_000, 50) == 995_000

    def test_rounds_down(self):
        assert minimum_received(999, 50) == 994

    def test_zero_slippage(self):
        assert minimum_received(1_234, 0) == 1_234

    @pytest.mark.parametrize("bps", [-1, 10_001])
    def test_out_of_range_rejected(self, bps):
        with pytest.raises(ValueError):
            minimum_received(1_000, bps)


class TestTradingFee:
    def test_fee(self):
        assert trading_fee(10_000, 30) == 30
        assert trading_fee(999, 30) == 2

    def test_bad_fee(self):
        with pytest.raises(ValueError):
            trading_fee(10_000, 20_000)


class TestPriceImpact:
    """Tests for impact estimates per pool kind."""

    def test_v2_impact(self):
        """V2 impact is amount_in / (2 * reserve_in)."""
        assert slippage_guard.price_impact_percent(v2_quote(10_000)) == pytest.approx(0.5)

    def test_clmm_impact(self):
        """CLMM impact is the shortfall against the fee-adjusted pool rate."""
        pool = make_clmm_pool(price_x6=1_000_000, liquidity=2_000_000)
        quote = best_quote(UGNOT, USDC, 1_000, [], [pool])
        # expected rate 0.997, executed 0.996
        expected = (0.997 - 0.996) / 0.997 * 100
        assert slippage_guard.price_impact_percent(quote) == pytest.approx(expected)

    def test_clmm_impact_selling_b_uses_inverse_price(self):
        pool = make_clmm_pool(price_x6=2_000_000, liquidity=10_000_000)
        quote = best_quote(USDC, UGNOT, 1_000, [], [pool])
        expected_rate = 0.5 * 0.997
        impact = slippage_guard.price_impact_percent(quote)
        assert impact == pytest.approx((expected_rate - quote.amount_out / 1_000) / expected_rate * 100)
        assert 0 <= impact < 1

    def test_clmm_impact_floored_at_zero(self):
        """An executed rate better than the pool rate reports zero impact."""
        pool = make_clmm_pool(price_x6=1_000_000, liquidity=2_000_000)
        quote = Quote(
            pool_kind=PoolKind.CLMM,
            pool=pool,
            token_in="A",
            amount_in=1_000,
            amount_out=1_100,
        )
        assert slippage_guard.price_impact_percent(quote) == 0.0


class TestSummarize:
    """Tests for the bundled trade summary."""

    def test_summary_figures(self):
        quote = v2_quote(10_000)
        summary = slippage_guard.summarize(quote, slippage_bps=100)
        assert summary.amount_in == 10_000
        assert summary.amount_out == quote.amount_out
        assert summary.minimum_received == quote.amount_out * 9_900 // 10_000
        assert summary.trading_fee == 30
        assert summary.slippage_bps == 100

    def test_default_slippage(self):
        summary = slippage_guard.summarize(v2_quote(10_000))
        assert summary.slippage_bps == 50

    @pytest.mark.parametrize(
        "amount_in,severity",
        [
            (10_000, ImpactSeverity.BENIGN),
            (20_000, ImpactSeverity.CAUTION),
            (99_000, ImpactSeverity.CAUTION),
            (100_000, ImpactSeverity.WARNING),
        ],
    )
    def test_severity_thresholds(self, amount_in, severity):
        """<1% benign, 1-5% caution, >=5% warning."""
        summary = slippage_guard.summarize(v2_quote(amount_in))
        assert summary.severity is severity
        assert summary.needs_confirmation == (severity is ImpactSeverity.WARNING)

    def test_custom_thresholds(self):
        guard = SlippageGuard(QuoteConfig(caution_impact_percent=0.1, warning_impact_percent=0.4))
        assert guard.summarize(v2_quote(10_000)).severity is ImpactSeverity.WARNING

    def test_invalid_slippage(self):
        with pytest.raises(ValueError):
            slippage_guard.summarize(v2_quote(10_000), slippage_bps=10_001)
