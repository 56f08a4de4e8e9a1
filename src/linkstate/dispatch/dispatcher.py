"""
Action dispatcher for deep-link commands.

A Dispatcher owns a registry of bindings and a single error handler. Given a
raw fragment it parses the command behind the marker prefix and invokes the
handler bound to the command's action with the values of the parameters that
binding asked for.

Example:
    dispatcher = Dispatcher()
    dispatcher.register("open_file", ["file"], lambda args: print(args))
    dispatcher.dispatch('#csai:open_file file="a/b.txt"')  # prints ['a/b.txt']
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from linkstate.core.command import Command
from linkstate.dispatch.binding import Binding, ErrorHandler, Handler
from linkstate.dispatch.settings import DispatcherSettings
from linkstate.exceptions import (
    DuplicateBindingError,
    LexError,
    MissingArgumentError,
    StateSyntaxError,
)
from linkstate.parsing.parser import parse_command

logger = logging.getLogger(__name__)


class Dispatcher:
    """Registry of action bindings plus the dispatch entry point.

    Responsibilities:
      - Keep bindings in registration order; the first binding for an action wins.
      - Funnel every parse and argument-resolution failure to one error handler.
      - Treat a missing marker prefix or an unbound action as a silent no-op.

    Notes:
      - Registration is expected to happen during setup. Handlers may call
        `dispatch` again; no state is held across the handler call.
      - Exceptions raised by handlers themselves are not caught.
    """

    def __init__(self, settings: DispatcherSettings | None = None, **overrides: Any):
        """
        Initialize the dispatcher.

        Params:
            settings: Complete settings object; takes precedence over overrides
            overrides: Individual DispatcherSettings fields used when no
                settings object is given
        """
        if settings is None:
            settings = DispatcherSettings(**overrides)
        self.settings = settings
        self._bindings: list[Binding] = []
        self._by_action: dict[str, Binding] = {}
        self._error_handler: ErrorHandler | None = None

    @property
    def bindings(self) -> tuple[Binding, ...]:
        """All registered bindings, in registration order."""
        return tuple(self._bindings)

    def register(
        self, action: str, required_params: Iterable[str], handler: Handler
    ) -> Binding:
        """
        Register a handler for an action.

        Params:
            action: Action name to bind
            required_params: Parameter names whose values the handler receives,
                in this order
            handler: Callable receiving the list of resolved values

        Returns:
            The stored Binding

        Raises:
            TypeError: If required_params is a bare string
            DuplicateBindingError: If the action is already bound and the
                settings reject duplicates
        """
        if isinstance(required_params, str):
            raise TypeError(
                f"required_params for '{action}' must be a sequence of names, not a string"
            )

        binding = Binding(action, required_params, handler)
        if action in self._by_action:
            if self.settings.duplicate_bindings == "reject":
                raise DuplicateBindingError(action)
            logger.warning(
                "Binding %s is shadowed by an earlier binding for '%s'", binding, action
            )
        else:
            self._by_action[action] = binding

        self._bindings.append(binding)
        logger.debug("Registered binding %s", binding)
        return binding

    def on(self, action: str, *required_params: str) -> Callable[[Handler], Handler]:
        """
        Decorator form of `register`.

        Example:
            @dispatcher.on("highlight", "from", "to")
            def highlight(args):
                ...
        """

        def decorator(handler: Handler) -> Handler:
            self.register(action, required_params, handler)
            return handler

        return decorator

    def set_error_handler(self, handler: ErrorHandler | None) -> None:
        """
        Install the error handler, replacing any previous one.

        Params:
            handler: Callable receiving the error message, or None to remove it
        """
        self._error_handler = handler

    def find(self, action: str) -> Binding | None:
        """
        Get the binding that dispatch would use for an action.

        Params:
            action: Action name

        Returns:
            The first binding registered for the action, None if unbound
        """
        return self._by_action.get(action)

    def clear(self) -> None:
        """Drop all bindings and the error handler."""
        self._bindings.clear()
        self._by_action.clear()
        self._error_handler = None

    def dispatch(self, raw: str) -> bool:
        """
        Parse a raw fragment and run the matching handler.

        Params:
            raw: Fragment text, e.g. '#csai:open_file file="a/b.txt"'

        Returns:
            True if a handler was invoked, False otherwise
        """
        prefix = self.settings.marker_prefix
        if not raw.startswith(prefix):
            return False

        logger.debug("Dispatching %r", raw)
        try:
            command = parse_command(raw[len(prefix) :])
        except (LexError, StateSyntaxError) as e:
            self._report(e.describe(self.settings.error_level))
            return False

        return self.dispatch_command(command)

    def dispatch_command(self, command: Command) -> bool:
        """
        Run the handler for an already parsed Command.

        Params:
            command: The command to route

        Returns:
            True if a handler was invoked, False otherwise
        """
        binding = self.find(command.action)
        if binding is None:
            logger.debug("No binding for action '%s'", command.action)
            return False

        try:
            values = command.arguments(binding.required_params)
        except MissingArgumentError as e:
            self._report(e.message)
            return False

        logger.debug("Invoking %s with %r", binding, values)
        binding.handler(values)
        return True

    def _report(self, message: str) -> None:
        if self._error_handler is None:
            logger.warning("Unhandled deep-link error: %s", message)
            return
        self._error_handler(message)
