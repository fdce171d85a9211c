"""Cursor bound to a buffer's current document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .ranges import Position

if TYPE_CHECKING:
    from .buffer import Buffer


class Cursor:
    """Mutable position handle that refuses to leave the document bounds."""

    def __init__(self, buffer: "Buffer", position: Position = Position()) -> None:
        self._buffer = buffer
        self.position = position
        # Column to aim for when moving vertically through shorter lines.
        self._sticky_offset = position.offset

    def __repr__(self) -> str:
        return f"Cursor(line={self.line}, offset={self.offset})"

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def offset(self) -> int:
        return self.position.offset

    def move_to(self, position: Position) -> bool:
        if not self._buffer.document.contains(position):
            return False
        self.position = position
        self._sticky_offset = position.offset
        return True

    def move_left(self) -> bool:
        if self.offset == 0:
            return False
        return self.move_to(Position(self.line, self.offset - 1))

    def move_right(self) -> bool:
        return self.move_to(Position(self.line, self.offset + 1))

    def move_up(self) -> bool:
        if self.line == 0:
            return False
        return self._move_to_line(self.line - 1)

    def move_down(self) -> bool:
        if self.line >= self._buffer.line_count - 1:
            return False
        return self._move_to_line(self.line + 1)

    def move_to_first_line(self) -> bool:
        return self._move_to_line(0)

    def move_to_last_line(self) -> bool:
        return self._move_to_line(self._buffer.line_count - 1)

    def move_to_start_of_line(self) -> bool:
        return self.move_to(Position(self.line, 0))

    def move_to_end_of_line(self) -> bool:
        return self.move_to(Position(self.line, len(self._buffer.line(self.line))))

    def _move_to_line(self, line: int) -> bool:
        offset = min(self._sticky_offset, len(self._buffer.line(line)))
        sticky = self._sticky_offset
        moved = self.move_to(Position(line, offset))
        self._sticky_offset = sticky
        return moved


__all__ = ["Cursor"]
