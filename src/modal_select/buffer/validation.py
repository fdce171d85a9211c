"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .document import BufferDocument
from .ranges import Position, Range


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer an out-of-bounds position."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position


def ensure_position(document: BufferDocument, position: Position) -> Position:
    if position.line < 0 or position.line >= document.line_count:
        raise BufferValidationError("Line out of range", position=position)
    line = document.get_line(position.line)
    if position.offset < 0 or position.offset > len(line):
        raise BufferValidationError("Offset out of range", position=position)
    return position


def ensure_range(document: BufferDocument, range: Range) -> Range:
    ensure_position(document, range.start)
    ensure_position(document, range.end)
    return range


__all__ = ["BufferValidationError", "ensure_position", "ensure_range"]
