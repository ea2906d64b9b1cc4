"""Test helpers module for shared test utilities.

- constants: Denoms and addresses
- factories: Pool and position factory functions
"""

from tests.helpers.constants import BAR, FOO, OTHER_OWNER, OWNER, UGNOT, USDC
from tests.helpers.factories import make_clmm_pool, make_position, make_v2_pool

__all__ = [
    # Constants
    "UGNOT",
    "USDC",
    "FOO",
    "BAR",
    "OWNER",
    "OTHER_OWNER",
    # Factories
    "make_v2_pool",
    "make_clmm_pool",
    "make_position",
]
