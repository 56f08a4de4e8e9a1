"""
LinkState dispatch components.

This package provides the action registry that routes parsed commands to the
handlers registered by UI components.
"""

from linkstate.dispatch.binding import Binding
from linkstate.dispatch.dispatcher import Dispatcher
from linkstate.dispatch.settings import DEFAULT_MARKER_PREFIX, DispatcherSettings

__all__ = [
    "Binding",
    "Dispatcher",
    "DispatcherSettings",
    "DEFAULT_MARKER_PREFIX",
]
