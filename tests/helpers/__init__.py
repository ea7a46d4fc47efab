"""Test helpers module for shared test utilities.

- constants: Token decimals and common amounts
- factories: BigVal factory functions and look-alikes
"""

from tests.helpers.constants import ONE_ETHER_WEI, TOKEN_DECIMALS, UINT256_MAX
from tests.helpers.factories import ForeignBigVal, make_token_amount

__all__ = [
    # Constants
    "ONE_ETHER_WEI",
    "TOKEN_DECIMALS",
    "UINT256_MAX",
    # Factories
    "make_token_amount",
    "ForeignBigVal",
]
