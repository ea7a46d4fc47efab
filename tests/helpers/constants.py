"""Shared amount constants for tests.

Usage:
    from tests.helpers import ONE_ETHER_WEI, TOKEN_DECIMALS
"""

# =============================================================================
# Token decimals (mainnet conventions)
# =============================================================================

TOKEN_DECIMALS = {
    "WETH": 18,
    "DAI": 18,
    "USDC": 6,
    "USDT": 6,
    "WBTC": 8,
}

# =============================================================================
# Common amounts
# =============================================================================

ONE_ETHER_WEI = 10**18
UINT256_MAX = 2**256 - 1
