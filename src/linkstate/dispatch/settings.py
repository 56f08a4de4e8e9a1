"""
Configuration for the command dispatcher.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from linkstate.exceptions import ErrorLevel

DEFAULT_MARKER_PREFIX = "#csai:"


class DispatcherSettings(BaseModel):
    """
    Settings for a Dispatcher instance.

    Params:
        marker_prefix: Leading text that marks a fragment as a command
        duplicate_bindings: "reject" raises on a second binding for the same
            action, "first_wins" keeps it but only the first is ever reached
        error_level: Detail level of messages passed to the error handler
    """

    model_config = ConfigDict(frozen=True)

    marker_prefix: str = Field(default=DEFAULT_MARKER_PREFIX, min_length=1)
    duplicate_bindings: Literal["reject", "first_wins"] = "reject"
    error_level: ErrorLevel = ErrorLevel.USER
