"""Pydantic field types for BigVal amounts.

Amount validates numbers, Decimals, BigVals and ``<number> [<scale>]``
strings into a BigVal and serializes back to the base-10 string:

    class Transfer(BaseModel):
        value: Amount

    Transfer(value="1.5 coins").value.scale == Scale.NORMAL
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from bigval.config import BigValConfig, resolve_config
from bigval.value import BigVal

__all__ = ["Amount", "smallest_unit_amount"]


def _parse_amount(value: Any, config: BigValConfig) -> BigVal:
    if isinstance(value, str):
        return BigVal.from_str(value, config)
    return BigVal(value, config=config)


def _serialize_amount(value: BigVal) -> str:
    return value.to_string()


def _validate_default(value: Any) -> BigVal:
    return _parse_amount(value, resolve_config(None))


_JSON_SCHEMA = WithJsonSchema(
    {"type": "string", "description": "Number, optionally followed by a scale (min or coins)"}
)

Amount = Annotated[
    BigVal,
    PlainValidator(_validate_default),
    PlainSerializer(_serialize_amount, return_type=str),
    _JSON_SCHEMA,
]


def smallest_unit_amount(config: BigValConfig | Mapping[str, Any] | None = None) -> Any:
    """Build an Amount type that normalizes to the smallest unit.

    Args:
        config: Configuration applied to inputs that are not BigVals

    Returns:
        An Annotated BigVal type for use in pydantic models
    """
    resolved = resolve_config(config)

    def validate(value: Any) -> BigVal:
        return _parse_amount(value, resolved).to_smallest_scale()

    return Annotated[
        BigVal,
        PlainValidator(validate),
        PlainSerializer(_serialize_amount, return_type=str),
        _JSON_SCHEMA,
    ]
