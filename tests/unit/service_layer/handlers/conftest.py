"""Fixtures for handler tests."""

import pytest

from .fakes import bootstrap_test_bus


@pytest.fixture
def bus_params():
    """Overridable keyword arguments for `bootstrap_test_bus`."""
    return {}


@pytest.fixture
def make_test_bus(bus_params):  # pylint: disable=redefined-outer-name
    """Zero-argument factory for a freshly wired bus."""
    return lambda: bootstrap_test_bus(**bus_params)
