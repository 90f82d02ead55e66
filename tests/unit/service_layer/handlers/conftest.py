"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from startupnet.adapters.clocks import ManualClock
from tests.fixtures.datagen import T0

from .fakes import bootstrap_test_bus

if TYPE_CHECKING:
    from startupnet.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name


@pytest.fixture
def clock() -> ManualClock:
    """A manual clock stopped at `T0`; tests move it explicitly."""
    return ManualClock(T0)


@pytest.fixture
def bus_params(clock):
    """Default bus parameters. Classes can override this fixture"""
    return {"clock": clock}


@pytest.fixture
def make_test_bus(bus_params) -> Callable[..., MessageBus]:
    """Factory to create a message bus with in-memory adapters for testing."""

    def _make():
        return bootstrap_test_bus(**bus_params)

    return _make
