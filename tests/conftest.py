"""
Shared test fixtures and utilities for the linkstate test suite.
"""

from unittest.mock import Mock

import pytest

from linkstate.dispatch import Dispatcher


@pytest.fixture
def dispatcher():
    """Fresh dispatcher with default settings."""
    return Dispatcher()


@pytest.fixture
def error_handler(dispatcher):
    """Mock error handler already installed on the `dispatcher` fixture.

    Usage:
        def test_something(dispatcher, error_handler):
            dispatcher.dispatch("#csai:...")
            error_handler.assert_called_once_with("...")
    """
    handler = Mock()
    dispatcher.set_error_handler(handler)
    return handler
