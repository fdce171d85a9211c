"""Viewport bookkeeping: which lines of each buffer are visible."""

from __future__ import annotations

from typing import Dict, Tuple

from modal_select.buffer import Buffer


class View:
    def __init__(self, *, height: int) -> None:
        if height <= 0:
            raise ValueError("height must be positive")
        self.height = height
        self._scroll_offsets: Dict[int, int] = {}

    def scroll_offset(self, buffer: Buffer) -> int:
        return self._scroll_offsets.get(id(buffer), 0)

    def visible_range(self, buffer: Buffer) -> Tuple[int, int]:
        """First visible line and one past the last, clamped to the buffer."""

        top = self.scroll_offset(buffer)
        return top, min(top + self.height, buffer.line_count)

    def scroll_to_cursor(self, buffer: Buffer) -> None:
        line = buffer.cursor.line
        top = self.scroll_offset(buffer)
        if line < top:
            top = line
        elif line >= top + self.height:
            top = line - self.height + 1
        self._scroll_offsets[id(buffer)] = top

    def forget(self, buffer: Buffer) -> None:
        self._scroll_offsets.pop(id(buffer), None)


__all__ = ["View"]
