"""Value configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from bigval.engine import MAX_EXPONENT
from bigval.errors import InvalidConfigError


@dataclass(frozen=True)
class BigValConfig:
    """Configuration carried by every BigVal instance.

    Attributes:
        decimals: Number of decimal places separating the smallest unit from
            the normal unit (default: 18, as for ether/wei). At most
            MAX_EXPONENT, the largest shift the engine can represent.
    """

    decimals: int = 18

    def __post_init__(self) -> None:
        if isinstance(self.decimals, bool) or not isinstance(self.decimals, int):
            raise InvalidConfigError(
                f"decimals must be an int, got {type(self.decimals).__name__}"
            )
        if self.decimals < 0:
            raise InvalidConfigError(f"decimals cannot be negative: {self.decimals}")
        if self.decimals > MAX_EXPONENT:
            raise InvalidConfigError(
                f"decimals cannot exceed {MAX_EXPONENT}: {self.decimals}"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> BigValConfig:
        """Build a config from a plain mapping such as ``{"decimals": 2}``.

        Missing keys fall back to the defaults.

        Raises:
            InvalidConfigError: If the mapping has unknown keys or bad values
        """
        unknown = set(data) - {"decimals"}
        if unknown:
            raise InvalidConfigError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)


# Default configuration instance
DEFAULT_CONFIG = BigValConfig()


def resolve_config(config: BigValConfig | Mapping[str, Any] | None) -> BigValConfig:
    """Return a BigValConfig for the accepted config inputs.

    Args:
        config: None (use DEFAULT_CONFIG), a BigValConfig, or a mapping

    Raises:
        InvalidConfigError: If config is of an unsupported type or invalid
    """
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, BigValConfig):
        return config
    if isinstance(config, Mapping):
        return BigValConfig.from_mapping(config)
    raise InvalidConfigError(f"Unsupported config type: {type(config).__name__}")
