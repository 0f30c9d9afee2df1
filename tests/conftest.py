"""Shared fixtures for dipswitch tests."""

import io
from unittest.mock import NonCallableMagicMock, create_autospec

import pytest

from dipswitch.devices import Switchable


@pytest.fixture
def output() -> io.StringIO:
    """A stream that devices print to instead of the console."""
    return io.StringIO()


@pytest.fixture
def switchable_double() -> NonCallableMagicMock:
    """A test double that satisfies the Switchable interface."""
    return create_autospec(Switchable, instance=True)
