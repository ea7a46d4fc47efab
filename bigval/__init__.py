"""bigval - arbitrary-precision decimal values with smallest/normal unit scales."""

from bigval.config import DEFAULT_CONFIG, BigValConfig
from bigval.errors import (
    BigValError,
    InvalidConfigError,
    InvalidScaleError,
    MagnitudeOverflowError,
    ParseError,
    UnrecognizedScaleError,
    UnsupportedBaseError,
)
from bigval.helpers import is_bigval, is_valid_scale, to_min_str, to_smallest_unit_string
from bigval.scale import Scale
from bigval.value import BigVal

__version__ = "0.1.0"
__all__ = [
    # Value type
    "BigVal",
    "BigValConfig",
    "DEFAULT_CONFIG",
    "Scale",
    # Helpers
    "is_bigval",
    "is_valid_scale",
    "to_min_str",
    "to_smallest_unit_string",
    # Errors
    "BigValError",
    "ParseError",
    "InvalidScaleError",
    "UnrecognizedScaleError",
    "UnsupportedBaseError",
    "InvalidConfigError",
    "MagnitudeOverflowError",
    "__version__",
]
