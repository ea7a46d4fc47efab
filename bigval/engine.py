"""Pinned decimal engine.

All arithmetic runs in PRECISE_CONTEXT (or a widened copy of it), passed
explicitly to every call so results never depend on the caller's
thread-local decimal context.

Parsing, scale shifts, addition and subtraction are exact. Multiplication
and division round to PRECISION significant digits. Magnitudes are kept
within [MIN_EXPONENT, MAX_EXPONENT] (adjusted exponent).

Base-10 output follows these rules:
- exponential notation when the adjusted exponent is >= TO_EXP_POS or
  <= TO_EXP_NEG, plain notation otherwise
- trailing zeros are never shown, zero renders as "0"
"""

from __future__ import annotations

import decimal
import re
from collections.abc import Iterator
from contextlib import contextmanager
from decimal import ROUND_HALF_UP, Decimal

import structlog

from bigval.errors import MagnitudeOverflowError, ParseError, UnsupportedBaseError

__all__ = [
    "PRECISION",
    "PRECISE_CONTEXT",
    "MAX_EXPONENT",
    "MIN_EXPONENT",
    "TO_EXP_POS",
    "TO_EXP_NEG",
    "parse_numeral",
    "ensure_in_range",
    "add",
    "subtract",
    "multiply",
    "divide",
    "shift",
    "decimal_places",
    "to_canonical_string",
    "to_plain_string",
    "to_fixed",
    "round_to_places",
    "to_radix_string",
    "to_float",
]

logger = structlog.get_logger()

# 78 significant digits - enough for every uint256 value (up to ~1.16 * 10^77)
PRECISION = 78

MAX_EXPONENT = 999_999
MIN_EXPONENT = -999_999

PRECISE_CONTEXT = decimal.Context(
    prec=PRECISION,
    rounding=ROUND_HALF_UP,
    Emax=MAX_EXPONENT,
    Emin=MIN_EXPONENT,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)

# Exponent thresholds for exponential notation in base-10 output
TO_EXP_POS = 33
TO_EXP_NEG = -7

# ASCII only: Decimal() alone would also take other Unicode digits and "_"
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?$", re.IGNORECASE | re.ASCII)
_PREFIXED_INT_RE = re.compile(r"^([+-]?)0([xob])([0-9a-f]+)$", re.IGNORECASE | re.ASCII)
_RADIX = {"x": 16, "o": 8, "b": 2}
_DIGITS = "0123456789abcdef"


def _parse_failed(raw: object, reason: str) -> ParseError:
    logger.debug("bigval_parse_failed", raw=repr(raw), reason=reason)
    return ParseError(f"Cannot parse {raw!r} as a number: {reason}")


def parse_numeral(text: str) -> Decimal:
    """Parse a decimal or prefixed-integer string exactly.

    Accepts ASCII decimal and scientific notation ("123.4", "-1e-8") and
    integers prefixed with 0x, 0o or 0b (case-insensitive, optional sign).
    Surrounding whitespace is ignored.

    Args:
        text: String to parse

    Returns:
        The parsed value, with no rounding applied

    Raises:
        ParseError: If text is not a valid numeral or its magnitude is
            outside the engine's exponent range
    """
    stripped = text.strip()

    match = _PREFIXED_INT_RE.match(stripped)
    if match:
        sign, prefix, digits = match.groups()
        try:
            value = Decimal(int(digits, _RADIX[prefix.lower()]))
        except ValueError as err:
            raise _parse_failed(text, "invalid digits for prefix") from err
        return ensure_in_range(value.copy_negate() if sign == "-" else value, text)

    if not _DECIMAL_RE.match(stripped):
        raise _parse_failed(text, "invalid numeral")

    try:
        with decimal.localcontext(PRECISE_CONTEXT):
            value = Decimal(stripped)
    except decimal.InvalidOperation as err:
        raise _parse_failed(text, "invalid numeral") from err
    return ensure_in_range(value, text)


def _in_range(value: Decimal) -> bool:
    if not value.is_finite():
        return False
    return value.is_zero() or MIN_EXPONENT <= value.adjusted() <= MAX_EXPONENT


def ensure_in_range(value: Decimal, raw: object) -> Decimal:
    """Return value if its adjusted exponent is within the engine range.

    Zeros are normalized to a plain zero.

    Raises:
        ParseError: If the magnitude is too large or too small
    """
    if not _in_range(value):
        raise _parse_failed(raw, "exponent out of range")
    if value.is_zero():
        return Decimal(0)
    return value


@contextmanager
def _guard_range() -> Iterator[None]:
    try:
        yield
    except decimal.Overflow as err:
        raise MagnitudeOverflowError("Result exceeds the maximum exponent") from err


def _checked(result: Decimal) -> Decimal:
    if not _in_range(result):
        raise MagnitudeOverflowError(f"Result exponent out of range: {result.adjusted()}")
    return result


def _exact_context(left: Decimal, right: Decimal) -> decimal.Context:
    """PRECISE_CONTEXT widened to hold the exact sum of both operands."""
    top = max(left.adjusted(), right.adjusted()) + 1
    bottom = min(left.as_tuple().exponent, right.as_tuple().exponent)
    context = PRECISE_CONTEXT.copy()
    context.prec = max(PRECISION, top - bottom + 1)
    return context


def add(left: Decimal, right: Decimal) -> Decimal:
    """Exact sum."""
    with _guard_range():
        return _checked(_exact_context(left, right).add(left, right))


def subtract(left: Decimal, right: Decimal) -> Decimal:
    """Exact difference."""
    with _guard_range():
        return _checked(_exact_context(left, right).subtract(left, right))


def multiply(left: Decimal, right: Decimal) -> Decimal:
    """Product, rounded to PRECISION significant digits."""
    with _guard_range():
        return _checked(PRECISE_CONTEXT.multiply(left, right))


def divide(left: Decimal, right: Decimal) -> Decimal:
    """Quotient, rounded to PRECISION significant digits.

    Raises:
        ZeroDivisionError: If right is zero
    """
    if right.is_zero():
        raise ZeroDivisionError("BigVal division by zero")
    with _guard_range():
        return _checked(PRECISE_CONTEXT.divide(left, right))


def _strip_trailing_zeros(value: Decimal) -> tuple[int, str, int]:
    """Return (sign, digits, exponent) with trailing zeros removed exactly."""
    sign, digit_tuple, exponent = value.as_tuple()
    digits = "".join(map(str, digit_tuple)).lstrip("0")
    if not digits:
        return 0, "0", 0
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return sign, stripped, exponent


def shift(value: Decimal, power: int) -> Decimal:
    """Multiply value by 10^power exactly (power may be negative).

    Raises:
        MagnitudeOverflowError: If the result leaves the engine range
    """
    if value.is_zero():
        return value
    if not MIN_EXPONENT <= value.adjusted() + power <= MAX_EXPONENT:
        raise MagnitudeOverflowError(f"Shifting by 10^{power} leaves the exponent range")
    sign, digits, exponent = value.as_tuple()
    return Decimal((sign, digits, exponent + power))


def decimal_places(value: Decimal) -> int:
    """Number of digits after the decimal point, ignoring trailing zeros."""
    _, _, exponent = _strip_trailing_zeros(value)
    return max(0, -exponent)


def _plain(digits: str, exponent: int) -> str:
    if exponent >= 0:
        return digits + "0" * exponent
    point = len(digits) + exponent
    if point > 0:
        return f"{digits[:point]}.{digits[point:]}"
    return "0." + "0" * -point + digits


def to_plain_string(value: Decimal) -> str:
    """Base-10 string in plain (never exponential) notation."""
    sign, digits, exponent = _strip_trailing_zeros(value)
    return ("-" if sign else "") + _plain(digits, exponent)


def to_canonical_string(value: Decimal) -> str:
    """Base-10 string, exponential beyond the configured thresholds."""
    sign, digits, exponent = _strip_trailing_zeros(value)
    prefix = "-" if sign else ""
    adjusted = exponent + len(digits) - 1

    if TO_EXP_NEG < adjusted < TO_EXP_POS:
        return prefix + _plain(digits, exponent)

    mantissa = digits[0] if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
    exp_sign = "+" if adjusted >= 0 else "-"
    return f"{prefix}{mantissa}e{exp_sign}{abs(adjusted)}"


def _quantize(value: Decimal, places: int) -> Decimal:
    """Round half-up to a fixed number of decimal places.

    Precision is widened as needed so the quantize never overflows the
    coefficient.
    """
    context = PRECISE_CONTEXT.copy()
    context.prec = max(PRECISION, value.adjusted() + places + 2)
    quantum = Decimal((0, (1,), -places))
    return value.quantize(quantum, context=context)


def to_fixed(value: Decimal, places: int | None = None) -> str:
    """Base-10 string with exactly `places` decimal places.

    Args:
        value: Value to format
        places: Decimal places to show; None renders the full value in
            plain notation without rounding

    Raises:
        ValueError: If places is negative
    """
    if places is None:
        return to_plain_string(value)
    if places < 0:
        raise ValueError(f"Decimal places cannot be negative: {places}")
    rounded = _quantize(value, places)
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return format(rounded, "f")


def round_to_places(value: Decimal, places: int = 0) -> Decimal:
    """Round half-up to `places` decimal places."""
    if places < 0:
        raise ValueError(f"Decimal places cannot be negative: {places}")
    return _quantize(value, places)


def to_radix_string(value: Decimal, base: int) -> str:
    """String representation in base 2 or 16.

    Integral values convert exactly. A fractional part is expanded in the
    target base until it terminates or PRECISION significant digits have
    been produced, rounding the last digit half-up.

    Base 16 output carries a "0x" prefix, base 2 output has none.

    Raises:
        UnsupportedBaseError: If base is not 2 or 16
    """
    if base not in (2, 16):
        raise UnsupportedBaseError(f"Unsupported base: {base}")

    sign, digit_tuple, exponent = value.as_tuple()
    coefficient = int("".join(map(str, digit_tuple)) or "0")
    if exponent >= 0:
        integral, remainder, denominator = coefficient * 10**exponent, 0, 1
    else:
        denominator = 10**-exponent
        integral, remainder = divmod(coefficient, denominator)

    fraction: list[int] = []
    significant = len(format(integral, "x" if base == 16 else "b")) if integral else 0
    while remainder and significant < PRECISION:
        digit, remainder = divmod(remainder * base, denominator)
        fraction.append(digit)
        if significant or digit:
            significant += 1

    if remainder and remainder * 2 >= denominator:
        # Round half-up, carrying into the integral part if needed
        index = len(fraction) - 1
        while index >= 0:
            fraction[index] += 1
            if fraction[index] < base:
                break
            fraction[index] = 0
            index -= 1
        else:
            integral += 1

    while fraction and fraction[-1] == 0:
        fraction.pop()

    body = format(integral, "x" if base == 16 else "b")
    if fraction:
        body += "." + "".join(_DIGITS[d] for d in fraction)

    negative = sign and (integral or fraction)
    prefix = "0x" if base == 16 else ""
    return ("-" if negative else "") + prefix + body


def to_float(value: Decimal) -> float:
    """Convert to float; precision loss is accepted and logged."""
    result = float(value)
    if Decimal(result) != value:
        logger.debug("bigval_lossy_float_conversion", value=to_canonical_string(value), result=result)
    return result
