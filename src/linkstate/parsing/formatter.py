"""
Formatting of Commands back into command text.

Used by hosts that build shareable links; the output parses back to an equal
Command.
"""

from linkstate.core.command import Command
from linkstate.parsing.tokenizer import ESCAPE, IDENT_TERMINATORS, QUOTE

_FORBIDDEN_NAME_CHARS = IDENT_TERMINATORS | {QUOTE}


def quote_value(value: str) -> str:
    """
    Quote a value as a string literal.

    Params:
        value: Raw value, may contain quotes and tildes

    Returns:
        The value wrapped in quotes with `~` and `"` escaped
    """
    escaped = value.replace(ESCAPE, ESCAPE + ESCAPE).replace(QUOTE, ESCAPE + QUOTE)
    return f"{QUOTE}{escaped}{QUOTE}"


def _check_name(name: str, what: str) -> None:
    if not name:
        raise ValueError(f"{what} can't be empty")
    bad = sorted(set(name) & _FORBIDDEN_NAME_CHARS)
    if bad:
        raise ValueError(
            f"{what} {name!r} contains reserved characters: {', '.join(map(repr, bad))}"
        )


def format_command(command: Command, prefix: str = "") -> str:
    """
    Render a Command as canonical command text.

    Params:
        command: Command to render
        prefix: Marker prefix to prepend, e.g. "#csai:"

    Returns:
        Text of the form `action p1="v1" p2="v2"`

    Raises:
        ValueError: If the action or a parameter name can't be written as an identifier
    """
    _check_name(command.action, "action")
    parts = [command.action]
    for arg in command.args:
        _check_name(arg.parameter, "parameter")
        parts.append(f"{arg.parameter}={quote_value(arg.value)}")
    return prefix + " ".join(parts)
