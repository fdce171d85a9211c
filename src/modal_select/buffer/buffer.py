"""Buffer façade combining document, cursor, and undo history."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from modal_select.runtime import telemetry

from .cursor import Cursor
from .document import BufferDocument
from .ranges import Position, Range
from .undo import UndoEntry, UndoTimeline
from .validation import ensure_range


class Buffer:
    def __init__(
        self,
        *,
        name: str = "untitled",
        document: Optional[BufferDocument] = None,
        undo: Optional[UndoTimeline] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.history = undo or UndoTimeline()
        self.cursor = Cursor(self)

    def __repr__(self) -> str:
        return f"Buffer(name={self.name!r}, lines={self.line_count})"

    @classmethod
    def from_text(cls, text: str, *, name: str = "untitled") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_text(text))

    def data(self) -> str:
        return self.document.text()

    @property
    def line_count(self) -> int:
        return self.document.line_count

    def line(self, index: int) -> str:
        return self.document.get_line(index)

    def read(self, range: Range) -> Optional[str]:
        """Return the text covered by ``range``, or ``None`` if it's out of bounds."""

        if not (
            self.document.contains(range.start) and self.document.contains(range.end)
        ):
            return None
        text = self.document.text()
        return text[
            self.document.offset_for(range.start) : self.document.offset_for(range.end)
        ]

    def delete_range(self, range: Range) -> None:
        """Remove ``range``, pulling a cursor inside or after it back accordingly."""

        ensure_range(self.document, range)
        start = self.document.offset_for(range.start)
        end = self.document.offset_for(range.end)
        cursor = self.document.offset_for(self.cursor.position)
        if cursor >= end:
            cursor -= end - start
        elif cursor > start:
            cursor = start
        self._edit(start, end, "", cursor_offset=cursor, label="delete_range")

    def insert(self, text: str) -> None:
        """Insert ``text`` at the cursor without moving it."""

        at = self.document.offset_for(self.cursor.position)
        self._edit(at, at, text, cursor_offset=at, label="insert")

    def start_operation_group(self, label: str = "operation_group") -> None:
        self.history.begin_group(label)

    def end_operation_group(self) -> None:
        self.history.end_group()

    def operation_group(self, label: str = "operation_group") -> "OperationGroup":
        return OperationGroup(self, label)

    def undo(self) -> bool:
        entry = self.history.undo()
        if entry is None:
            return False
        self._restore(entry.before_text, entry.cursor_before)
        return True

    def redo(self) -> bool:
        entry = self.history.redo()
        if entry is None:
            return False
        self._restore(entry.after_text, entry.cursor_after)
        return True

    def _edit(
        self, start: int, end: int, replacement: str, *, cursor_offset: int, label: str
    ) -> None:
        with telemetry.span(
            name=f"buffer::{label}",
            component=True,
            metadata={"buffer": self.name},
        ):
            before_text = self.document.text()
            cursor_before = self.cursor.position
            after_text = before_text[:start] + replacement + before_text[end:]
            self.document = self.document.replaced(after_text)
            self.cursor.move_to(self.document.position_for(cursor_offset))
            self.history.record(
                UndoEntry(
                    label=label,
                    before_text=before_text,
                    after_text=after_text,
                    cursor_before=cursor_before,
                    cursor_after=self.cursor.position,
                )
            )

    def _restore(self, text: str, cursor: Position) -> None:
        self.document = self.document.replaced(text)
        self.cursor.move_to(cursor)


class OperationGroup(AbstractContextManager["OperationGroup"]):
    """Brackets buffer edits so they undo as one step, even when one raises."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "OperationGroup":
        self._span_cm = telemetry.span(
            name=f"buffer::group::{self.label}",
            component=True,
            metadata={"buffer": self.buffer.name},
        )
        self._span_cm.__enter__()
        self.buffer.start_operation_group(self.label)
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            self.buffer.end_operation_group()
        finally:
            if self._span_cm is not None:
                span_cm, self._span_cm = self._span_cm, None
                span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["Buffer", "OperationGroup"]
