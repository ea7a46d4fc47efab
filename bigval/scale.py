"""Number scales.

A value is expressed either in the smallest indivisible unit (``min``, e.g.
wei) or in the user-facing unit (``coins``, e.g. ether). For a configuration
with ``decimals = D``:

    magnitude at SMALLEST = magnitude at NORMAL * 10^D
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from bigval.errors import InvalidScaleError


class Scale(str, Enum):
    """Unit convention a magnitude is expressed in."""

    SMALLEST = "min"
    NORMAL = "coins"

    # Historical names
    MIN = "min"
    COINS = "coins"


def is_valid_scale(scale: Any) -> bool:
    """Check whether scale is a Scale member or the name of one."""
    if isinstance(scale, Scale):
        return True
    if isinstance(scale, str):
        return scale.strip() in {member.value for member in Scale}
    return False


def parse_scale(scale: Any) -> Scale:
    """Convert a Scale or scale name to a Scale.

    Args:
        scale: Scale member or one of "min", "coins"

    Returns:
        The matching Scale

    Raises:
        InvalidScaleError: If scale is not recognized
    """
    if isinstance(scale, Scale):
        return scale
    if isinstance(scale, str):
        try:
            return Scale(scale.strip())
        except ValueError as err:
            raise InvalidScaleError(f"Invalid scale: {scale!r}") from err
    raise InvalidScaleError(f"Invalid scale: {scale!r}")
