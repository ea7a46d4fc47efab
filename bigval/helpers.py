"""Free helper functions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bigval.coerce import is_bigval
from bigval.config import BigValConfig
from bigval.scale import is_valid_scale
from bigval.value import BigVal

__all__ = ["is_bigval", "is_valid_scale", "to_min_str", "to_smallest_unit_string"]


def to_min_str(text: str, config: BigValConfig | Mapping[str, Any] | None = None) -> str:
    """Get the base-10 string of a ``<number> [<scale>]`` value in the smallest unit.

    Args:
        text: Number optionally followed by a scale name ("min" or "coins");
            "min" is assumed when omitted
        config: Configuration (default: DEFAULT_CONFIG, 18 decimals)

    Returns:
        Base-10 string of the value at Scale.SMALLEST

    Examples:
        to_min_str("1 coins", BigValConfig(decimals=2)) == "100"
        to_min_str("100") == "100"
    """
    return BigVal.from_str(text, config).to_smallest_scale().to_string()


to_smallest_unit_string = to_min_str
