"""Factory functions for creating test values."""

from bigval import BigVal, BigValConfig, Scale
from tests.helpers.constants import TOKEN_DECIMALS


def make_token_amount(value, token: str = "WETH", scale: Scale = Scale.NORMAL) -> BigVal:
    """Create a BigVal using a token's decimals.

    Args:
        value: Amount (any accepted BigVal input)
        token: Token symbol from TOKEN_DECIMALS
        scale: Scale of value (default: normal units)

    Returns:
        BigVal configured with the token's decimals
    """
    return BigVal(value, scale, BigValConfig(decimals=TOKEN_DECIMALS[token]))


class ForeignBigVal:
    """BigVal look-alike, as produced by another loaded copy of the package."""

    def __init__(self, magnitude, scale, decimals):
        self.magnitude = magnitude
        self.scale = scale
        self.config = type("ForeignConfig", (), {"decimals": decimals})()

    def to_string(self, base=10):
        return str(self.magnitude)

    def to_smallest_scale(self):
        raise NotImplementedError
