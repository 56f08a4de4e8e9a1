"""
Exception classes for LinkState command processing.

This module defines specific exception types for the error conditions that can
occur while tokenizing, parsing and dispatching deep-link commands.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Bare message, as shown to the error handler
    DEVELOPER = "developer"  # Message plus the command text with a caret


@dataclass
class ErrorContext:
    """
    Location of an error within the command text.

    Params:
        text: The command text being processed (marker prefix already removed)
        position: Offset of the offending character, or len(text) for end of input
    """

    text: str
    position: int

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string, empty at USER level
        """
        if error_level != ErrorLevel.DEVELOPER:
            return ""

        lines = [
            f"  at position {self.position}",
            f"  command: {self.text}",
            "           " + " " * self.position + "^",
        ]
        return "\n".join(lines)


class LinkStateError(Exception):
    """Base exception for all LinkState-related errors."""

    def __init__(self, message: str):
        """
        Initialize the exception.

        Params:
            message: Error message without any location details
        """
        self.message = message
        super().__init__(message)


class _LocatedError(LinkStateError):
    """Error raised at a known position in the command text."""

    def __init__(
        self,
        message: str,
        position: int,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        self.position = position
        self.context = context
        self.error_level = error_level
        super().__init__(message)

    def __str__(self) -> str:
        return self.describe(self.error_level)

    def describe(self, error_level: ErrorLevel) -> str:
        """
        Render the message at the given detail level.

        Params:
            error_level: USER for the bare message, DEVELOPER to add the location

        Returns:
            The message, followed by the caret location when available
        """
        if self.context is None:
            return self.message
        location_info = self.context.format_location(error_level)
        if not location_info:
            return self.message
        return f"{self.message}\n{location_info}"


class LexError(_LocatedError):
    """Raised when the command text contains a malformed character sequence."""

    def __init__(
        self,
        sequence: str,
        position: int,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            sequence: The offending escape sequence, e.g. "~q"
            position: Offset of the escape introducer
            context: ErrorContext with the command text
            error_level: Level of detail to show in str(error)
        """
        self.sequence = sequence
        super().__init__(
            f"invalid escape sequence: {sequence}", position, context, error_level
        )


class StateSyntaxError(_LocatedError):
    """Raised when the token stream does not match the command grammar."""

    def __init__(
        self,
        expected: str,
        found: str | None,
        position: int,
        context: ErrorContext | None = None,
        error_level: ErrorLevel = ErrorLevel.USER,
    ):
        """
        Initialize the exception.

        Params:
            expected: What the grammar required, e.g. "equals"
            found: Value of the token found instead, None at end of input
            position: Offset of the offending token, or the input length
            context: ErrorContext with the command text
            error_level: Level of detail to show in str(error)
        """
        self.expected = expected
        self.found = found
        got = "end of input" if found is None else f"`{found}`"
        super().__init__(
            f"expected {expected} but got {got}", position, context, error_level
        )


class EmptyStateError(StateSyntaxError):
    """Raised when the command text holds no tokens at all."""

    def __init__(self, context: ErrorContext | None = None):
        """
        Initialize the exception.

        Params:
            context: ErrorContext with the command text
        """
        self.expected = "state name"
        self.found = None
        _LocatedError.__init__(self, "state can't be empty", 0, context)


class MissingArgumentError(LinkStateError):
    """Raised when a command lacks a parameter that a binding requires."""

    def __init__(self, parameter: str, action: str | None = None):
        """
        Initialize the exception.

        Params:
            parameter: Name of the missing parameter
            action: Action of the command being resolved, if known
        """
        self.parameter = parameter
        self.action = action
        super().__init__(f"expected parameter `{parameter}`")


class DuplicateBindingError(LinkStateError):
    """Raised when registering a second binding for an action that already has one."""

    def __init__(self, action: str):
        """
        Initialize the exception.

        Params:
            action: The action name that is already bound
        """
        self.action = action
        super().__init__(f"Action '{action}' already has a registered binding")
