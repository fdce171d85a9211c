"""Undo/redo history with operation grouping."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional

from .ranges import Position


@dataclass(frozen=True, slots=True)
class UndoEntry:
    label: str
    before_text: str
    after_text: str
    cursor_before: Position
    cursor_after: Position

    def merged(self, later: "UndoEntry") -> "UndoEntry":
        return replace(
            self, after_text=later.after_text, cursor_after=later.cursor_after
        )


class UndoTimeline:
    """Linear history of text snapshots.

    Edits recorded while a group is open are folded into a single entry that
    lands on the timeline when the outermost group closes. Recording after an
    undo drops the redo tail.
    """

    def __init__(self) -> None:
        self._entries: List[UndoEntry] = []
        self._index: int = -1
        self._group_depth = 0
        self._group_label: Optional[str] = None
        self._pending: Optional[UndoEntry] = None

    def __len__(self) -> int:
        return self._index + 1

    @property
    def grouping(self) -> bool:
        return self._group_depth > 0

    def begin_group(self, label: str = "operation_group") -> None:
        if self._group_depth == 0:
            self._group_label = label
        self._group_depth += 1

    def end_group(self) -> None:
        if self._group_depth == 0:
            raise RuntimeError("No operation group is open")
        self._group_depth -= 1
        if self._group_depth == 0:
            pending, self._pending = self._pending, None
            if pending is not None:
                self._push(replace(pending, label=self._group_label or pending.label))
            self._group_label = None

    def record(self, entry: UndoEntry) -> None:
        if not self.grouping:
            self._push(entry)
        elif self._pending is None:
            self._pending = entry
        else:
            self._pending = self._pending.merged(entry)

    def can_undo(self) -> bool:
        return self._index >= 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def undo(self) -> Optional[UndoEntry]:
        if not self.can_undo():
            return None
        entry = self._entries[self._index]
        self._index -= 1
        return entry

    def redo(self) -> Optional[UndoEntry]:
        if not self.can_redo():
            return None
        self._index += 1
        return self._entries[self._index]

    def _push(self, entry: UndoEntry) -> None:
        del self._entries[self._index + 1 :]
        self._entries.append(entry)
        self._index = len(self._entries) - 1


__all__ = ["UndoEntry", "UndoTimeline"]
