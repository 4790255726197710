# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import threading

import pytest

from recfactory.core.factory import RecordFactory
from recfactory.core.registry import TypeRegistry


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "stress: mark test as a stress test")
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def registry():
    """An empty registry for named record types."""
    return TypeRegistry()


@pytest.fixture
def factory(registry):
    """A factory with its own registry, so tests never share bindings."""
    return RecordFactory(registry=registry)


@pytest.fixture
def strict_factory():
    """A factory that refuses record types without fields."""
    return RecordFactory(allow_empty=False)


@pytest.fixture
def point_type(factory):
    """A registered two-field record type."""
    return factory("Point", "x", "y")


@pytest.fixture
def point(point_type):
    return point_type(3, 4)


@pytest.fixture
def error_classes():
    """Provides a tuple of error classes for quick reference."""
    from recfactory.core.errors import (
        ArgumentError,
        ArityError,
        FactoryError,
        UnknownFieldError,
        UnknownTypeError,
    )

    return (FactoryError, ArityError, UnknownFieldError, UnknownTypeError, ArgumentError)


@pytest.fixture(autouse=True)
def cleanup_threads():
    yield
    # Cleanup any remaining threads after each test
    for thread in threading.enumerate():
        if thread != threading.current_thread() and thread.is_alive():
            thread.join(timeout=1.0)
