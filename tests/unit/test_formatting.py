"""Tests for display helpers."""

import pytest

from gnomo.formatting import (
    calculate_price,
    format_amount,
    format_denom,
    format_pair_name,
    format_price_x6,
)
from tests.helpers import UGNOT

USDC_COIN = "gno.land/r/demo:usdc"


class TestFormatDenom:
    @pytest.mark.parametrize(
        "denom,expected",
        [(UGNOT, "GNOT"), (USDC_COIN, "USDC"), ("foo", "FOO"), ("", "")],
    )
    def test_format_denom(self, denom, expected):
        assert format_denom(denom) == expected

    def test_pair_name(self):
        assert format_pair_name(UGNOT, USDC_COIN) == "GNOT/USDC"


class TestFormatAmount:
    """Amounts render in whole tokens with a truncated fraction."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (1_500_000, "1.5"),
            (1_000_000, "1"),
            (5, "0.000005"),
            (0, "0"),
            (-2_500_000, "-2.5"),
            (123_456_789, "123.456789"),
        ],
    )
    def test_format_amount(self, amount, expected):
        assert format_amount(amount, UGNOT) == expected

    def test_max_frac_truncates(self):
        assert format_amount(1_239_999, UGNOT, max_frac=2) == "1.23"
        assert format_amount(1_000_999, UGNOT, max_frac=2) == "1"


class TestPrices:
    def test_calculate_price(self):
        assert calculate_price(1_000_000, 2_000_000, UGNOT, USDC_COIN) == 2.0
        assert calculate_price(3, 1, UGNOT, USDC_COIN) == pytest.approx(1 / 3)

    def test_calculate_price_empty(self):
        assert calculate_price(0, 1_000, UGNOT, USDC_COIN) == 0.0

    def test_precision_truncates(self):
        assert calculate_price(3, 2, UGNOT, USDC_COIN, precision=2) == 0.66

    def test_format_price_x6(self):
        assert format_price_x6(1_500_000) == "1.500000"
        assert format_price_x6(1) == "0.000001"
