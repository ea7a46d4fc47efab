"""Tests for BigValConfig."""

import dataclasses

import pytest

from bigval import DEFAULT_CONFIG, BigValConfig, InvalidConfigError
from bigval.config import resolve_config
from bigval.engine import MAX_EXPONENT


class TestBigValConfig:
    """Tests for BigValConfig construction and validation."""

    def test_default_decimals(self):
        """Default is 18 decimals."""
        assert BigValConfig().decimals == 18
        assert DEFAULT_CONFIG == BigValConfig(decimals=18)

    def test_zero_decimals(self):
        """Zero decimals is allowed."""
        assert BigValConfig(decimals=0).decimals == 0

    def test_frozen(self):
        """Configs cannot be modified."""
        config = BigValConfig(decimals=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.decimals = 3  # type: ignore[misc]

    @pytest.mark.parametrize("decimals", [-1, 1.5, "18", True, None, 10**6])
    def test_invalid_decimals(self, decimals):
        """decimals must be a non-negative int within the engine exponent range."""
        with pytest.raises(InvalidConfigError):
            BigValConfig(decimals=decimals)  # type: ignore[arg-type]

    def test_from_mapping(self):
        """from_mapping() reads decimals and defaults missing keys."""
        assert BigValConfig.from_mapping({"decimals": 6}) == BigValConfig(decimals=6)
        assert BigValConfig.from_mapping({}) == DEFAULT_CONFIG

    def test_from_mapping_unknown_keys(self):
        """Unknown keys are rejected."""
        with pytest.raises(InvalidConfigError):
            BigValConfig.from_mapping({"decimals": 6, "symbol": "USDC"})


class TestResolveConfig:
    """Tests for resolve_config()."""

    def test_none_is_default(self):
        """None resolves to DEFAULT_CONFIG."""
        assert resolve_config(None) is DEFAULT_CONFIG

    def test_config_passes_through(self):
        """A BigValConfig is returned as-is."""
        config = BigValConfig(decimals=8)
        assert resolve_config(config) is config

    def test_mapping(self):
        """Mappings are converted."""
        assert resolve_config({"decimals": 8}) == BigValConfig(decimals=8)

    def test_unsupported_type(self):
        """Other types are rejected."""
        with pytest.raises(InvalidConfigError):
            resolve_config(8)  # type: ignore[arg-type]


class TestDecimalsBound:
    """Tests for the upper bound on decimals."""

    def test_largest_allowed(self):
        """decimals may be as large as the engine exponent range."""
        assert BigValConfig(decimals=MAX_EXPONENT).decimals == MAX_EXPONENT

    def test_mapping_over_bound(self):
        """The bound applies to mapping configs too."""
        with pytest.raises(InvalidConfigError):
            resolve_config({"decimals": MAX_EXPONENT + 1})
