"""Protocol constants for the gnomo DEX.

Centralizes the fixed-point scales and tick parameters shared by the
V2 and CLMM realms.
"""

# Fees and slippage are expressed in basis points
BPS_DENOMINATOR = 10_000

# CLMM prices are stored on-chain as integers scaled by 1e6 (priceX6)
PRICE_SCALE = 1_000_000

# Each tick is a fixed 1% price step
TICK_BASE = 1.01

# Widest symmetric tick range whose priceX6 stays >= 1:
# ln(1e6) / ln(1.01) = 1388.4
MAX_TICK = 1388
MIN_TICK = -MAX_TICK

# Scale for integer square roots of prices (sqrt(price) * 1e9)
SQRT_PRICE_SCALE = 1_000_000_000

# Every denom on the chain uses 6 decimals (ugnot, grc20 tokens, LP shares)
DEFAULT_DECIMALS = 6

# Native denom and its display symbol
NATIVE_DENOM = "ugnot"
NATIVE_SYMBOL = "GNOT"
