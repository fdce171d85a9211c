"""Literal search results with a movable "current match"."""

from __future__ import annotations

from typing import List, Optional, Sequence

from modal_select.buffer import Buffer, Position, Range


class SearchResults:
    """Ordered, non-overlapping matches plus the index of the selected one."""

    def __init__(self, matches: Sequence[Range], *, selected: int = 0) -> None:
        self.matches: List[Range] = list(matches)
        self._selected = selected if self.matches else None

    def __len__(self) -> int:
        return len(self.matches)

    @classmethod
    def find(cls, buffer: Buffer, query: str) -> "SearchResults":
        if not query:
            raise ValueError("query cannot be empty")
        matches: List[Range] = []
        for row, line in enumerate(buffer.document.snapshot()):
            start = line.find(query)
            while start != -1:
                end = start + len(query)
                matches.append(Range(Position(row, start), Position(row, end)))
                start = line.find(query, end)
        return cls(matches)

    def selection(self) -> Optional[Range]:
        if self._selected is None:
            return None
        return self.matches[self._selected]

    def select_closest(self, position: Position) -> Optional[Range]:
        """Select the first match starting at or after ``position``, wrapping."""

        if not self.matches:
            return None
        self._selected = next(
            (i for i, match in enumerate(self.matches) if match.start >= position),
            0,
        )
        return self.selection()

    def select_next(self) -> Optional[Range]:
        if self._selected is None:
            return None
        self._selected = (self._selected + 1) % len(self.matches)
        return self.selection()

    def select_previous(self) -> Optional[Range]:
        if self._selected is None:
            return None
        self._selected = (self._selected - 1) % len(self.matches)
        return self.selection()


__all__ = ["SearchResults"]
