"""
LinkState - deep-link command language for document viewers

LinkState parses commands carried in a URL fragment and routes them to the
handlers that restore the page state they describe.
"""

from importlib.metadata import version

from linkstate.core import Argument, Command
from linkstate.dispatch import Binding, Dispatcher, DispatcherSettings
from linkstate.exceptions import (
    DuplicateBindingError,
    LexError,
    LinkStateError,
    MissingArgumentError,
    StateSyntaxError,
)
from linkstate.parsing import format_command, parse_command, tokenize

__version__ = version("linkstate")

__all__ = [
    "__version__",
    "Argument",
    "Binding",
    "Command",
    "Dispatcher",
    "DispatcherSettings",
    "DuplicateBindingError",
    "LexError",
    "LinkStateError",
    "MissingArgumentError",
    "StateSyntaxError",
    "format_command",
    "parse_command",
    "tokenize",
]
