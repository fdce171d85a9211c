"""Commands operating on the current selection."""

from __future__ import annotations

from typing import Optional

from modal_select.application import Application
from modal_select.buffer import Block, Buffer, ClipboardContent, Inline, Range
from modal_select.errors import (
    CommandError,
    ModeMismatchError,
    NoSelectionError,
    RangeReadError,
)
from modal_select.modes import SearchMode, SelectLineMode, SelectMode
from modal_select.runtime import telemetry
from modal_select.search import SearchResults

from . import application, view
from .helpers import require_buffer


def selection_range(app: Application, buffer: Buffer, *, action: str) -> Range:
    """Resolve the range the active mode currently selects.

    ``action`` names the operation in the error raised for modes that can't
    select anything.
    """

    mode = app.mode
    if isinstance(mode, (SelectMode, SelectLineMode)):
        return mode.to_range(buffer)
    if isinstance(mode, SearchMode):
        selection = mode.selection()
        if selection is None:
            raise NoSelectionError(
                f"Can't {action} in search mode without a selected result"
            )
        return selection
    raise ModeMismatchError(
        f"Can't {action} selections outside of select modes", mode=mode.name
    )


def delete(app: Application) -> None:
    buffer = require_buffer(app)
    delete_range = selection_range(app, buffer, action="delete")
    text = buffer.read(delete_range)
    if text is None:
        raise RangeReadError(
            "Couldn't read selected data from buffer", range=delete_range
        )
    buffer.delete_range(delete_range)
    if isinstance(app.mode, SearchMode):
        _refresh_results(app.mode, buffer, app.search_query)
    else:
        buffer.cursor.move_to(delete_range.start)
    app.bus.emit(
        "selection.delete",
        {"mode": app.mode.name, "range": delete_range, "text": text},
    )


def copy_and_delete(app: Application) -> None:
    try:
        _copy_to_clipboard(app)
    except CommandError as exc:
        _report_copy_failure("copy_and_delete", exc)
    delete(app)


def change(app: Application) -> None:
    try:
        _copy_to_clipboard(app)
    except CommandError as exc:
        _report_copy_failure("change", exc)
    delete(app)
    application.switch_to_insert_mode(app)
    view.scroll_to_cursor(app)


def copy(app: Application) -> None:
    _copy_to_clipboard(app)
    application.switch_to_normal_mode(app)


def select_all(app: Application) -> None:
    require_buffer(app).cursor.move_to_first_line()
    application.switch_to_select_line_mode(app)
    require_buffer(app).cursor.move_to_last_line()


def sort_lines(app: Application) -> None:
    buffer = require_buffer(app)
    mode = app.mode
    if not isinstance(mode, SelectLineMode):
        raise ModeMismatchError(
            "Can't sort lines outside of select line mode", mode=mode.name
        )

    line_range = mode.to_range(buffer)
    text = buffer.read(line_range)
    if text is None:
        raise RangeReadError(
            "Couldn't read lines to sort from buffer", range=line_range
        )

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    # Empty selections stay empty instead of gaining a stray newline.
    sorted_text = "".join(f"{line}\n" for line in sorted(lines))

    with buffer.operation_group("sort_lines"):
        buffer.delete_range(line_range)
        buffer.cursor.move_to(line_range.start)
        buffer.insert(sorted_text)

    app.bus.emit("selection.sort", {"range": line_range, "lines": len(lines)})
    application.switch_to_normal_mode(app)


def _copy_to_clipboard(app: Application) -> None:
    buffer = require_buffer(app)
    mode = app.mode
    if not isinstance(mode, (SelectMode, SelectLineMode)):
        raise ModeMismatchError(
            "Can't copy data to clipboard outside of select modes", mode=mode.name
        )
    selected_range = mode.to_range(buffer)
    data = buffer.read(selected_range)
    if data is None:
        raise RangeReadError(
            "Couldn't read selected data from buffer", range=selected_range
        )

    content: ClipboardContent
    if isinstance(mode, SelectLineMode):
        content = Block(data)
    else:
        content = Inline(data)
    app.clipboard.set_content(content)
    app.bus.emit("selection.copy", content)


def _refresh_results(mode: SearchMode, buffer: Buffer, query: Optional[str]) -> None:
    """Re-run ``query`` so the selected match always names text still present."""

    if not query:
        mode.results = None
        return
    mode.results = SearchResults.find(buffer, query)
    mode.results.select_closest(buffer.cursor.position)


def _report_copy_failure(command: str, exc: CommandError) -> None:
    telemetry.record_event(
        "selection.copy_skipped",
        level="warning",
        data={"command": command, "reason": str(exc)},
    )


__all__ = [
    "selection_range",
    "delete",
    "copy_and_delete",
    "change",
    "copy",
    "select_all",
    "sort_lines",
]
