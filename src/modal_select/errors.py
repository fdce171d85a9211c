"""Recoverable command failures surfaced to the user as status messages."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from modal_select.buffer.ranges import Range

BUFFER_MISSING = "No buffer available"


class CommandError(RuntimeError):
    """Base class for every failure a command reports back to the dispatcher."""


class BufferMissingError(CommandError):
    def __init__(self, message: str = BUFFER_MISSING) -> None:
        super().__init__(message)


class NoSelectionError(CommandError):
    """Raised when the active mode could select something but currently doesn't."""


class ModeMismatchError(CommandError):
    """Raised when a command is invoked in a mode it can't operate in."""

    def __init__(self, message: str, *, mode: Optional[str] = None) -> None:
        super().__init__(message)
        self.mode = mode


class ClipboardSyncError(CommandError):
    """Raised when the system clipboard can't be read or written."""


class RangeReadError(CommandError):
    """Raised when the buffer can't honour a range the engine computed."""

    def __init__(self, message: str, *, range: Optional["Range"] = None) -> None:
        super().__init__(message)
        self.range = range


class LogFileError(RuntimeError):
    """Raised when the log file can't be created."""


__all__ = [
    "BUFFER_MISSING",
    "CommandError",
    "BufferMissingError",
    "NoSelectionError",
    "ModeMismatchError",
    "ClipboardSyncError",
    "RangeReadError",
    "LogFileError",
]
