"""
Tests for error context and formatting system.

This module tests ErrorContext, ErrorLevel enum, and how exceptions
format messages based on error level (user vs developer).
"""

from linkstate.exceptions import (
    DuplicateBindingError,
    EmptyStateError,
    ErrorContext,
    ErrorLevel,
    LexError,
    LinkStateError,
    MissingArgumentError,
    StateSyntaxError,
)


class TestErrorContext:
    """Tests for ErrorContext formatting."""

    def test_user_level_is_empty(self):
        """User level adds no location details."""
        ctx = ErrorContext(text='a p="x~q"', position=6)
        assert ctx.format_location(ErrorLevel.USER) == ""

    def test_developer_level(self):
        """Developer level shows position, text and a caret."""
        ctx = ErrorContext(text="a p=bad", position=4)
        assert ctx.format_location(ErrorLevel.DEVELOPER).splitlines() == [
            "  at position 4",
            "  command: a p=bad",
            "               ^",
        ]


class TestExceptionMessages:
    """Tests for exception messages and attributes."""

    def test_hierarchy(self):
        """All errors share the LinkStateError base."""
        for error in (
            LexError("~q", 0),
            StateSyntaxError("equals", None, 0),
            EmptyStateError(),
            MissingArgumentError("file"),
            DuplicateBindingError("open_file"),
        ):
            assert isinstance(error, LinkStateError)
        assert issubclass(EmptyStateError, StateSyntaxError)

    def test_syntax_error_found_token(self):
        error = StateSyntaxError("equals", "x", 3)
        assert str(error) == "expected equals but got `x`"

    def test_syntax_error_end_of_input(self):
        error = StateSyntaxError("string argument", None, 4)
        assert str(error) == "expected string argument but got end of input"

    def test_empty_state_message(self):
        error = EmptyStateError()
        assert str(error) == "state can't be empty"
        assert error.expected == "state name"
        assert error.found is None
        assert error.position == 0

    def test_error_level_on_instance(self):
        """str() honours the error level stored on the exception."""
        ctx = ErrorContext(text='"~q"', position=1)
        error = LexError("~q", 1, ctx, error_level=ErrorLevel.DEVELOPER)
        assert str(error).startswith("invalid escape sequence: ~q\n  at position 1")
        assert error.message == "invalid escape sequence: ~q"

    def test_describe_without_context(self):
        error = LexError("~q", 1)
        assert error.describe(ErrorLevel.DEVELOPER) == "invalid escape sequence: ~q"

    def test_missing_argument(self):
        error = MissingArgumentError("file", "open_file")
        assert str(error) == "expected parameter `file`"
        assert error.action == "open_file"

    def test_duplicate_binding(self):
        assert "open_file" in str(DuplicateBindingError("open_file"))
