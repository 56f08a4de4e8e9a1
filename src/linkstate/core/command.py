"""
Command data model for LinkState.

A Command is the parsed form of a deep link: the action name plus the named
string arguments in the order they appeared in the link.
"""

from collections.abc import Iterable

from attrs import field, frozen

from linkstate.exceptions import MissingArgumentError


@frozen
class Argument:
    """A single `parameter="value"` pair of a command."""

    parameter: str
    value: str

    def __str__(self) -> str:
        return f"{self.parameter}={self.value!r}"


@frozen
class Command:
    """
    Parsed deep-link command.

    Parameter names are not required to be unique; lookups return the first
    occurrence in input order.

    Params:
        action: Name of the action, e.g. "open_file"
        args: Arguments in the order they appeared in the command text
    """

    action: str
    args: tuple[Argument, ...] = field(default=(), converter=tuple)

    @property
    def parameters(self) -> list[str]:
        """Parameter names in input order, duplicates included."""
        return [arg.parameter for arg in self.args]

    def argument(self, parameter: str) -> str | None:
        """
        Look up the value of a parameter.

        Params:
            parameter: Parameter name to look for

        Returns:
            Value of the first matching argument, or None when the parameter
            is absent. An empty string means the argument is present but empty.
        """
        for arg in self.args:
            if arg.parameter == parameter:
                return arg.value
        return None

    def arguments(self, parameters: Iterable[str]) -> list[str]:
        """
        Resolve several parameters at once, in the requested order.

        Params:
            parameters: Parameter names to resolve

        Returns:
            Values aligned with `parameters`

        Raises:
            MissingArgumentError: For the first parameter that is absent
        """
        values = []
        for parameter in parameters:
            value = self.argument(parameter)
            if value is None:
                raise MissingArgumentError(parameter, self.action)
            values.append(value)
        return values

    def __str__(self) -> str:
        if not self.args:
            return self.action
        return f"{self.action}({', '.join(str(arg) for arg in self.args)})"
