"""
LinkState exception classes.

This package provides all exception types used throughout LinkState for
consistent error handling and reporting.
"""

from linkstate.exceptions.core import (
    DuplicateBindingError,
    EmptyStateError,
    ErrorContext,
    ErrorLevel,
    LexError,
    LinkStateError,
    MissingArgumentError,
    StateSyntaxError,
)

__all__ = [
    "LinkStateError",
    "LexError",
    "StateSyntaxError",
    "EmptyStateError",
    "MissingArgumentError",
    "DuplicateBindingError",
    "ErrorContext",
    "ErrorLevel",
]
