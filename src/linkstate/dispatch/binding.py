from collections.abc import Callable

from attrs import field, frozen

Handler = Callable[[list[str]], None]
ErrorHandler = Callable[[str], None]


@frozen
class Binding:
    """Association of an action name, its required parameters and a handler."""

    action: str
    required_params: tuple[str, ...] = field(converter=tuple)
    handler: Handler

    def __str__(self) -> str:
        return f"{self.action}({', '.join(self.required_params)})"
