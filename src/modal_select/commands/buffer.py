"""Buffer-level commands: paste and undo history."""

from __future__ import annotations

from modal_select.application import Application
from modal_select.buffer import Block, Position

from .helpers import require_buffer


def paste(app: Application) -> None:
    """Insert clipboard content; blocks go below the cursor line, inline at it."""

    buffer = require_buffer(app)
    content = app.clipboard.get_content()
    if content is None:
        return

    with buffer.operation_group("paste"):
        if not isinstance(content, Block):
            buffer.insert(content.text)
            return

        line = buffer.cursor.line
        if line < buffer.line_count - 1:
            text = content.text if content.text.endswith("\n") else content.text + "\n"
            buffer.cursor.move_to(Position(line + 1, 0))
            buffer.insert(text)
        else:
            text = content.text[:-1] if content.text.endswith("\n") else content.text
            buffer.cursor.move_to_end_of_line()
            buffer.insert("\n" + text)
            buffer.cursor.move_to(Position(line + 1, 0))


def undo(app: Application) -> None:
    require_buffer(app).undo()


def redo(app: Application) -> None:
    require_buffer(app).redo()


__all__ = ["paste", "undo", "redo"]
