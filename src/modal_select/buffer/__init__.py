"""Buffer abstractions, ranges, clipboard, and undo history."""

from .buffer import Buffer, OperationGroup
from .clipboard import (
    Block,
    Clipboard,
    ClipboardBackend,
    ClipboardContent,
    Inline,
    SystemClipboard,
)
from .cursor import Cursor
from .document import BufferDocument
from .ranges import LineRange, Position, Range, inclusive_range
from .undo import UndoEntry, UndoTimeline
from .validation import BufferValidationError, ensure_position, ensure_range

__all__ = [
    "Buffer",
    "OperationGroup",
    "BufferDocument",
    "Cursor",
    "Position",
    "Range",
    "LineRange",
    "inclusive_range",
    "Clipboard",
    "ClipboardBackend",
    "ClipboardContent",
    "Inline",
    "Block",
    "SystemClipboard",
    "UndoEntry",
    "UndoTimeline",
    "BufferValidationError",
    "ensure_position",
    "ensure_range",
]
