"""Line storage for buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .ranges import Position


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text storage, rebuilt from flat text on every edit.

    Lines never contain ``"\\n"``; a document always holds at least one
    (possibly empty) line, so ``"a\\n"`` is stored as ``["a", ""]``.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=version)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def text(self) -> str:
        return "\n".join(self._lines)

    def replaced(self, text: str) -> "BufferDocument":
        """Return a document holding ``text`` with a bumped version."""

        return BufferDocument.from_text(text, version=self.version + 1)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def contains(self, position: Position) -> bool:
        if position.line < 0 or position.line >= len(self._lines):
            return False
        return 0 <= position.offset <= len(self._lines[position.line])

    def offset_for(self, position: Position) -> int:
        """Translate a position into an index into ``text()``."""

        offset = 0
        for line in self._lines[: position.line]:
            offset += len(line) + 1  # newline
        return offset + position.offset

    def position_for(self, offset: int) -> Position:
        running = 0
        for row, line in enumerate(self._lines):
            if offset <= running + len(line):
                return Position(row, offset - running)
            running += len(line) + 1
        last = len(self._lines) - 1
        return Position(last, len(self._lines[last]))


__all__ = ["BufferDocument"]
