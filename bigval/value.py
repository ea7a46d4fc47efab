"""BigVal: arbitrarily large or small decimal numbers with a unit scale.

All arithmetic methods are immutable: they return a new BigVal and leave the
receiver and operands unchanged.

At any given time a BigVal operates at a particular scale. The ``min`` scale
(Scale.SMALLEST) is for numbers already denominated in the smallest unit.
The ``coins`` scale (Scale.NORMAL) is for numbers which implicitly have
``config.decimals`` decimal places. With ``decimals = 2`` these are equal in
value:

    BigVal(100, Scale.SMALLEST, BigValConfig(decimals=2))
    BigVal(1, Scale.NORMAL, BigValConfig(decimals=2))

Example:
    >>> BigVal("1.5", Scale.NORMAL).to_smallest_scale().to_string()
    '1500000000000000000'
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from bigval import engine
from bigval.coerce import is_bigval, is_supported_input, to_decimal
from bigval.config import BigValConfig, resolve_config
from bigval.errors import InvalidScaleError, ParseError, UnrecognizedScaleError
from bigval.scale import Scale, parse_scale

__all__ = ["BigVal"]


def _copy_config(config: Any) -> BigValConfig:
    if isinstance(config, BigValConfig):
        return config
    if isinstance(config, Mapping):
        return BigValConfig.from_mapping(config)
    # Config from another loaded copy of the package
    return BigValConfig(decimals=config.decimals)


def _check_power(power: int) -> None:
    if isinstance(power, bool) or not isinstance(power, int):
        raise ValueError(f"Power must be an int, got {type(power).__name__}")
    if power < 0:
        raise ValueError(f"Power cannot be negative: {power}")


class BigVal:
    """Immutable decimal number tagged with a scale and a configuration.

    Attributes:
        magnitude: The numeric value, relative to scale and config (read-only)
        scale: Scale the magnitude is expressed in (read-only)
        config: Configuration holding the number of decimals (read-only)
    """

    __slots__ = ("_magnitude", "_scale", "_config")
    __hash__ = None  # type: ignore[assignment]  # Unhashable since we define __eq__

    _magnitude: Decimal
    _scale: Scale
    _config: BigValConfig

    def __init__(
        self,
        source: Any,
        scale: Scale | str = Scale.SMALLEST,
        config: BigValConfig | Mapping[str, Any] | None = None,
    ) -> None:
        """Create a BigVal.

        Args:
            source: Input number. If this is a BigVal then the scale and
                config arguments are ignored and the source's are used.
            scale: Scale of the input number (default: Scale.SMALLEST)
            config: Configuration (default: DEFAULT_CONFIG, 18 decimals)

        Raises:
            ParseError: If source cannot be interpreted as a number
            InvalidScaleError: If scale is not recognized
            InvalidConfigError: If config is invalid
        """
        if is_bigval(source):
            magnitude = to_decimal(source.magnitude)
            resolved_scale = parse_scale(source.scale)
            resolved_config = _copy_config(source.config)
        else:
            magnitude = to_decimal(source)
            resolved_scale = parse_scale(scale)
            resolved_config = resolve_config(config)

        object.__setattr__(self, "_magnitude", magnitude)
        object.__setattr__(self, "_scale", resolved_scale)
        object.__setattr__(self, "_config", resolved_config)

    @classmethod
    def _create(cls, magnitude: Decimal, scale: Scale, config: BigValConfig) -> BigVal:
        """Build an instance from already validated parts."""
        instance = cls.__new__(cls)
        object.__setattr__(instance, "_magnitude", magnitude)
        object.__setattr__(instance, "_scale", scale)
        object.__setattr__(instance, "_config", config)
        return instance

    def _derive(self, magnitude: Decimal, scale: Scale | None = None) -> BigVal:
        """New instance with the given magnitude, keeping config (and scale unless given)."""
        return self._create(magnitude, scale or self._scale, self._config)

    @classmethod
    def from_value(
        cls,
        source: Any,
        scale: Scale | str = Scale.SMALLEST,
        config: BigValConfig | Mapping[str, Any] | None = None,
    ) -> BigVal:
        """Construct a BigVal (same arguments as the constructor)."""
        return cls(source, scale, config)

    @classmethod
    def from_str(cls, text: str, config: BigValConfig | Mapping[str, Any] | None = None) -> BigVal:
        """Construct a BigVal from a string of the form ``<number> [<scale>]``.

        If the scale is omitted, Scale.SMALLEST is assumed.

        Raises:
            ParseError: If the string has no number or too many parts
            InvalidScaleError: If the scale name is not recognized
        """
        parts = text.split()
        if not parts or len(parts) > 2:
            raise ParseError(f"Expected '<number> [<scale>]', got {text!r}")
        scale = parts[1] if len(parts) == 2 else Scale.SMALLEST
        return cls(parts[0], scale, config)

    # --- Immutability ---

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"BigVal is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"BigVal is immutable, cannot delete {name!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._magnitude, self._scale, self._config))

    # --- Accessors ---

    @property
    def magnitude(self) -> Decimal:
        """The numeric value, relative to scale and config."""
        return self._magnitude

    @property
    def scale(self) -> Scale:
        """Current scale."""
        return self._scale

    @property
    def config(self) -> BigValConfig:
        """Configuration."""
        return self._config

    @property
    def decimal_count(self) -> int:
        """Number of digits after the decimal point (0 for integral values)."""
        return engine.decimal_places(self._magnitude)

    # --- Operand handling ---

    def _operand(self, other: Any) -> Decimal:
        """Magnitude of other, at this value's scale.

        BigVal operands are converted to the receiver's scale first; bare
        numbers and strings are taken to be at the receiver's scale already.
        """
        if is_bigval(other):
            return BigVal(other).to_scale(self._scale)._magnitude
        return to_decimal(other)

    # --- Arithmetic ---

    def add(self, other: Any) -> BigVal:
        """Add another number to this one. The result is exact.

        Raises:
            MagnitudeOverflowError: If the result leaves the exponent range
        """
        return self._derive(engine.add(self._magnitude, self._operand(other)))

    def sub(self, other: Any) -> BigVal:
        """Subtract another number from this one."""
        return self._derive(engine.subtract(self._magnitude, self._operand(other)))

    def mul(self, other: Any) -> BigVal:
        """Multiply with another number, rounding to 78 significant digits."""
        return self._derive(engine.multiply(self._magnitude, self._operand(other)))

    def div(self, other: Any) -> BigVal:
        """Divide this by another number.

        Raises:
            ZeroDivisionError: If other is zero
            MagnitudeOverflowError: If the result leaves the exponent range
        """
        return self._derive(engine.divide(self._magnitude, self._operand(other)))

    def round(self, decimal_places: int = 0) -> BigVal:
        """Round half-up to the given number of decimal places (default: whole number)."""
        return self._derive(engine.round_to_places(self._magnitude, decimal_places))

    # --- Comparison ---

    def gt(self, other: Any) -> bool:
        """Get whether this is greater than another number."""
        return self._magnitude > self._operand(other)

    def gte(self, other: Any) -> bool:
        """Get whether this is greater than or equal to another number."""
        return self._magnitude >= self._operand(other)

    def lt(self, other: Any) -> bool:
        """Get whether this is less than another number."""
        return self._magnitude < self._operand(other)

    def lte(self, other: Any) -> bool:
        """Get whether this is less than or equal to another number."""
        return self._magnitude <= self._operand(other)

    def eq(self, other: Any) -> bool:
        """Get whether this is equal to another number."""
        return self._magnitude == self._operand(other)

    # --- Scale conversion ---

    def scale_down(self, power: int) -> BigVal:
        """Multiply the magnitude by 10^power, towards the smallest unit.

        Scale and config are preserved. Useful for converting between
        decimal conventions other than this value's own.

        Raises:
            ValueError: If power is not a non-negative int
            MagnitudeOverflowError: If the result leaves the exponent range
        """
        _check_power(power)
        return self._derive(engine.shift(self._magnitude, power))

    def scale_up(self, power: int) -> BigVal:
        """Divide the magnitude by 10^power, towards a larger unit.

        Scale and config are preserved.
        """
        _check_power(power)
        return self._derive(engine.shift(self._magnitude, -power))

    def to_smallest_scale(self) -> BigVal:
        """Convert to the smallest-unit (``min``) scale."""
        if self._scale is Scale.SMALLEST:
            return self._derive(self._magnitude)
        return self._derive(
            engine.shift(self._magnitude, self._config.decimals), Scale.SMALLEST
        )

    def to_normal_scale(self) -> BigVal:
        """Convert to the normal-unit (``coins``) scale."""
        if self._scale is Scale.NORMAL:
            return self._derive(self._magnitude)
        return self._derive(
            engine.shift(self._magnitude, -self._config.decimals), Scale.NORMAL
        )

    to_min_scale = to_smallest_scale
    to_coin_scale = to_normal_scale

    def to_scale(self, scale: Scale | str) -> BigVal:
        """Convert to the given scale.

        Raises:
            UnrecognizedScaleError: If scale is not recognized
        """
        try:
            target = parse_scale(scale)
        except InvalidScaleError as err:
            raise UnrecognizedScaleError(f"Unrecognized scale: {scale!r}") from err

        if target is Scale.SMALLEST:
            return self.to_smallest_scale()
        return self.to_normal_scale()

    # --- Output ---

    def to_string(self, base: int = 10) -> str:
        """Get string representation in the given base.

        Base 10 uses exponential notation for very large or small values.
        Base 16 is 0x-prefixed lowercase, base 2 is unprefixed.

        Raises:
            UnsupportedBaseError: If base is not 2, 10 or 16
        """
        if base == 10:
            return engine.to_canonical_string(self._magnitude)
        return engine.to_radix_string(self._magnitude, base)

    def to_fixed(self, num_decimals: int | None = None) -> str:
        """Get base-10 string with the given number of decimal places (rounded half-up)."""
        return engine.to_fixed(self._magnitude, num_decimals)

    def to_number(self) -> float:
        """Get float representation. May lose precision for large magnitudes."""
        return engine.to_float(self._magnitude)

    # --- Python protocol ---

    def __add__(self, other: Any) -> BigVal:
        if not is_supported_input(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> BigVal:
        if not is_supported_input(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> BigVal:
        if not is_supported_input(other):
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Any) -> BigVal:
        if not is_supported_input(other):
            return NotImplemented
        if is_bigval(other):
            return BigVal(other).sub(self)
        return self._derive(engine.subtract(to_decimal(other), self._magnitude))

    def __mul__(self, other: Any) -> BigVal:
        if not is_supported_input(other):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, other: Any) -> BigVal:
        if not is_supported_input(other):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: Any) -> BigVal:
        if not is_supported_input(other):
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Any) -> BigVal:
        if not is_supported_input(other):
            return NotImplemented
        if is_bigval(other):
            return BigVal(other).div(self)
        return self._derive(engine.divide(to_decimal(other), self._magnitude))

    def __neg__(self) -> BigVal:
        return self._derive(self._magnitude.copy_negate())

    def __pos__(self) -> BigVal:
        return self

    def __abs__(self) -> BigVal:
        return self._derive(self._magnitude.copy_abs())

    def __eq__(self, other: object) -> bool:
        if not is_supported_input(other):
            return NotImplemented
        try:
            return self.eq(other)
        except ParseError:
            # Non-numeric strings are simply unequal
            return False

    def __lt__(self, other: Any) -> bool:
        if not is_supported_input(other):
            return NotImplemented
        return self.lt(other)

    def __le__(self, other: Any) -> bool:
        if not is_supported_input(other):
            return NotImplemented
        return self.lte(other)

    def __gt__(self, other: Any) -> bool:
        if not is_supported_input(other):
            return NotImplemented
        return self.gt(other)

    def __ge__(self, other: Any) -> bool:
        if not is_supported_input(other):
            return NotImplemented
        return self.gte(other)

    def __int__(self) -> int:
        """Convert to int, truncating toward zero."""
        return int(self._magnitude)

    def __float__(self) -> float:
        return self.to_number()

    def __bool__(self) -> bool:
        """True if non-zero."""
        return not self._magnitude.is_zero()

    def __repr__(self) -> str:
        return (
            f"BigVal('{self.to_string()}', scale='{self._scale.value}', "
            f"decimals={self._config.decimals})"
        )

    def __str__(self) -> str:
        return self.to_string()
