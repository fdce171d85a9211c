"""Character-wise selection anchored where the mode was entered."""

from __future__ import annotations

from dataclasses import dataclass

from modal_select.buffer import Buffer, Position, Range

from .base_mode import Mode


@dataclass(slots=True)
class SelectMode(Mode):
    name = "select"

    anchor: Position = Position()

    def to_range(self, buffer: Buffer) -> Range:
        return Range.between(buffer.cursor.position, self.anchor)
