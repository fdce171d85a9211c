"""Line-wise selection anchored on the line the mode was entered on."""

from __future__ import annotations

from dataclasses import dataclass

from modal_select.buffer import Buffer, LineRange, Range, inclusive_range

from .base_mode import Mode


@dataclass(slots=True)
class SelectLineMode(Mode):
    name = "select_line"

    anchor: int = 0

    def line_range(self, buffer: Buffer) -> LineRange:
        return LineRange(self.anchor, buffer.cursor.line)

    def to_range(self, buffer: Buffer) -> Range:
        return inclusive_range(self.line_range(buffer), buffer)
