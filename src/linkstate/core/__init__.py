"""
Core data model for LinkState.

This package contains the Command and Argument values produced by the parser
and consumed by the dispatcher.
"""

from linkstate.core.command import Argument, Command

__all__ = ["Argument", "Command"]
