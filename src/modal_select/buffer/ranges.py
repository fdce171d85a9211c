"""Positions, ranges, and line-range normalization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .buffer import Buffer


@dataclass(frozen=True, order=True, slots=True)
class Position:
    """Character location in a buffer; ordered by ``(line, offset)``."""

    line: int = 0
    offset: int = 0


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open ``[start, end)`` span with ``start <= end``."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")

    @classmethod
    def between(cls, first: Position, second: Position) -> "Range":
        if first <= second:
            return cls(first, second)
        return cls(second, first)

    def is_empty(self) -> bool:
        return self.start == self.end

    def includes(self, position: Position) -> bool:
        return self.start <= position < self.end


@dataclass(frozen=True, slots=True)
class LineRange:
    """Unordered pair of line indices, e.g. a select-line anchor and cursor."""

    anchor: int
    cursor: int

    @property
    def start(self) -> int:
        return min(self.anchor, self.cursor)

    @property
    def end(self) -> int:
        return max(self.anchor, self.cursor)


def inclusive_range(line_range: LineRange, buffer: "Buffer") -> Range:
    """Convert a line range into a character range covering every line in it.

    The trailing newline of the last line is included unless that line is the
    buffer's final line, which has no newline to claim.
    """

    start = Position(line_range.start, 0)
    last = line_range.end
    if last < buffer.line_count - 1:
        end = Position(last + 1, 0)
    else:
        end = Position(last, len(buffer.line(last)))
    return Range(start, end)


__all__ = ["Position", "Range", "LineRange", "inclusive_range"]
