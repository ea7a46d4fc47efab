"""Input coercion.

Accepted inputs form a closed set:
- Decimal
- int (bool is rejected)
- float (converted through its shortest repr, so 0.1 stays 0.1)
- str (decimal, scientific, or 0x/0o/0b prefixed integer)
- big-integer adapters implementing __index__ (numpy integers, gmpy2 mpz, ...)
- BigVal-shaped values, recognized structurally by is_bigval()
"""

from __future__ import annotations

import math
import operator
from decimal import Decimal
from typing import Any, SupportsIndex

from bigval.engine import ensure_in_range, parse_numeral
from bigval.errors import ParseError

__all__ = ["is_bigval", "is_supported_input", "to_decimal"]


def is_bigval(value: Any) -> bool:
    """Structural check for BigVal-like values.

    True iff value is an instance (not None, not a class) exposing a
    magnitude, a scale, and the to_string / to_smallest_scale operations.
    Values created by another loaded copy of this package are recognized
    too.
    """
    if value is None or isinstance(value, type):
        return False
    return (
        hasattr(value, "magnitude")
        and hasattr(value, "scale")
        and callable(getattr(value, "to_string", None))
        and callable(getattr(value, "to_smallest_scale", None))
    )


def is_supported_input(value: Any) -> bool:
    """Whether value belongs to one of the accepted input variants."""
    if isinstance(value, bool):
        return False
    return (
        isinstance(value, (Decimal, int, float, str, SupportsIndex))
        or is_bigval(value)
    )


def to_decimal(value: Any) -> Decimal:
    """Coerce a single non-BigVal input to a Decimal, exactly.

    Args:
        value: One of the accepted input variants (see module docstring)

    Returns:
        The value as a finite Decimal

    Raises:
        ParseError: If value is of an unsupported type, not finite, out of
            the engine exponent range, or a string that is not a valid numeral
    """
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ParseError(f"Value must be finite, got {value}")
        return ensure_in_range(value, value)

    if isinstance(value, bool):
        raise ParseError(f"Booleans are not numbers: {value!r}")

    if isinstance(value, int):
        converted = Decimal(value)
        return ensure_in_range(converted, converted)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise ParseError(f"Value must be finite, got {value}")
        return Decimal(repr(value))

    if isinstance(value, str):
        return parse_numeral(value)

    if isinstance(value, SupportsIndex):
        converted = Decimal(operator.index(value))
        return ensure_in_range(converted, converted)

    raise ParseError(f"Unsupported input type: {type(value).__name__}")
