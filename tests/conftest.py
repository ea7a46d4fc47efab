"""Pytest configuration and fixtures."""

import pytest

from bigval import BigVal, BigValConfig, Scale


@pytest.fixture
def cents_config() -> BigValConfig:
    """Configuration with 2 decimals (1 coin = 100 min)."""
    return BigValConfig(decimals=2)


@pytest.fixture
def one_ether() -> BigVal:
    """One ether at normal scale with the default 18 decimals."""
    return BigVal(1, Scale.NORMAL)


@pytest.fixture
def one_ether_wei() -> BigVal:
    """One ether expressed in wei (smallest scale)."""
    return BigVal(10**18)
