"""bigval error classes.

All errors derive from BigValError. The ones caused by bad caller input also
derive from ValueError so generic handlers keep working.
"""


class BigValError(Exception):
    """Base error for bigval operations."""

    pass


class ParseError(BigValError, ValueError):
    """Input cannot be interpreted as a number."""

    pass


class InvalidScaleError(BigValError, ValueError):
    """Scale tag or name is not one of the recognized scales."""

    pass


class UnrecognizedScaleError(InvalidScaleError):
    """Scale conversion target is not recognized."""

    pass


class UnsupportedBaseError(BigValError, ValueError):
    """String output requested in a base other than 2, 10 or 16."""

    pass


class InvalidConfigError(BigValError, ValueError):
    """Configuration values are out of range."""

    pass


class MagnitudeOverflowError(BigValError, OverflowError):
    """Result magnitude is outside the engine's exponent range."""

    pass
