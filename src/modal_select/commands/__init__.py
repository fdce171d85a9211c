"""Commands operating on the application state, plus their registry."""

from . import application, buffer, cursor, search, selection, view
from .registry import (
    DEFAULT_COMMANDS,
    CommandRef,
    CommandRegistry,
    CommandResult,
    dispatch,
    load_default_commands,
)

__all__ = [
    "application",
    "buffer",
    "cursor",
    "search",
    "selection",
    "view",
    "CommandRef",
    "CommandRegistry",
    "CommandResult",
    "DEFAULT_COMMANDS",
    "dispatch",
    "load_default_commands",
]
