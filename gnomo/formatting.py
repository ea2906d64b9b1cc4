"""Display helpers for denoms, amounts and prices.

Every denom is treated as having 6 decimals (ugnot and the demo tokens all
use micro-units).
"""

from __future__ import annotations

from gnomo.constants import DEFAULT_DECIMALS, NATIVE_DENOM, NATIVE_SYMBOL, PRICE_SCALE


def decimals_for_denom(denom: str) -> int:
    return DEFAULT_DECIMALS


def format_denom(denom: str) -> str:
    """Short display symbol: "ugnot" -> "GNOT", "gno.land/r/demo:usdc" -> "USDC"."""
    if not denom:
        return ""
    last = denom.rsplit(":", 1)[-1]
    if last == NATIVE_DENOM:
        return NATIVE_SYMBOL
    return last.upper()


def format_pair_name(denom_a: str, denom_b: str) -> str:
    """Pair label used as the price history key, e.g. "GNOT/USDC"."""
    return f"{format_denom(denom_a)}/{format_denom(denom_b)}"


def format_amount(amount: int, denom: str, max_frac: int = DEFAULT_DECIMALS) -> str:
    """Render a smallest-unit amount in whole tokens.

    The fraction is truncated (not rounded) to max_frac digits and trailing
    zeros are dropped: format_amount(1_500_000, "ugnot") == "1.5".
    """
    decimals = decimals_for_denom(denom)
    sign = "-" if amount < 0 else ""
    value = abs(amount)

    if decimals == 0:
        return f"{sign}{value}"

    whole, frac = divmod(value, 10**decimals)
    frac_digits = str(frac).rjust(decimals, "0")[: min(decimals, max_frac)].rstrip("0")
    return f"{sign}{whole}.{frac_digits}" if frac_digits else f"{sign}{whole}"


def calculate_price(
    reserve_a: int,
    reserve_b: int,
    denom_a: str,
    denom_b: str,
    precision: int = 12,
) -> float:
    """Price of A in B from pool reserves, adjusted for decimals.

    Computed in integers scaled by 10**precision (clamped to 0..18) before the
    final division, so large reserves do not lose precision. Returns 0.0 for
    an empty A reserve.
    """
    if reserve_a == 0:
        return 0.0

    scale_a = 10 ** decimals_for_denom(denom_a)
    scale_b = 10 ** decimals_for_denom(denom_b)
    prec = 10 ** max(0, min(18, precision))

    scaled = reserve_b * scale_a * prec // (reserve_a * scale_b)
    return scaled / prec


def format_price_x6(price_x6: int) -> str:
    """A 1e6 fixed-point price with six decimals, e.g. 1_500_000 -> "1.500000"."""
    return f"{price_x6 / PRICE_SCALE:.6f}"


__all__ = [
    "calculate_price",
    "decimals_for_denom",
    "format_amount",
    "format_denom",
    "format_pair_name",
    "format_price_x6",
]
