from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional

import pytest

from modal_select.application import Application
from modal_select.buffer import Block, Buffer, Clipboard, Inline, Position, Range
from modal_select.commands import application, cursor, search, selection
from modal_select.errors import (
    BufferMissingError,
    ClipboardSyncError,
    ModeMismatchError,
    NoSelectionError,
    RangeReadError,
)
from modal_select.modes import (
    InsertMode,
    NormalMode,
    SearchMode,
    SelectLineMode,
    SelectMode,
)
from modal_select.runtime.preferences import Preferences

TEXT = "amp\neditor\nbuffer"


class FailingClipboard:
    def copy(self, text: str) -> None:
        raise ClipboardSyncError("system clipboard unavailable")

    def paste(self) -> str:
        raise ClipboardSyncError("system clipboard unavailable")


def make_app(
    text: Optional[str] = TEXT,
    *,
    position: Position = Position(0, 0),
    clipboard: Optional[Clipboard] = None,
    view_height: int = 40,
) -> Application:
    app = Application(
        preferences=Preferences(directory=Path("."), view_height=view_height),
        clipboard=clipboard or Clipboard(),
    )
    if text is not None:
        buffer = app.workspace.add_buffer(Buffer.from_text(text))
        buffer.cursor.move_to(position)
    return app


def current(app: Application) -> Buffer:
    buffer = app.workspace.current_buffer()
    assert buffer is not None
    return buffer


def flat_offset(text: str, position: Position) -> int:
    lines = text.split("\n")
    return sum(len(line) + 1 for line in lines[: position.line]) + position.offset


def test_select_all_selects_the_entire_buffer() -> None:
    app = make_app(position=Position(1, 3))

    selection.select_all(app)

    assert isinstance(app.mode, SelectLineMode)
    assert app.mode.anchor == 0
    assert current(app).cursor.line == 2


def test_select_all_requires_a_buffer() -> None:
    app = make_app(None)

    with pytest.raises(BufferMissingError):
        selection.select_all(app)

    assert isinstance(app.mode, NormalMode)


def test_delete_removes_the_selection_in_select_mode() -> None:
    app = make_app(position=Position(1, 0))

    application.switch_to_select_mode(app)
    cursor.move_right(app)
    selection.delete(app)

    assert current(app).data() == "amp\nditor\nbuffer"
    assert current(app).cursor.position == Position(1, 0)


def test_delete_removes_the_selected_line_in_select_line_mode() -> None:
    app = make_app(position=Position(1, 0))

    application.switch_to_select_line_mode(app)
    selection.delete(app)

    assert current(app).data() == "amp\nbuffer"
    assert current(app).cursor.position == Position(1, 0)


def test_delete_removes_the_current_result_in_search_mode() -> None:
    app = make_app(position=Position(1, 0))
    app.search_query = "ed"

    application.switch_to_search_mode(app)
    search.accept_query(app)
    selection.delete(app)

    assert current(app).data() == "amp\nitor\nbuffer"


@pytest.mark.parametrize(
    "anchor, target",
    [
        (Position(0, 1), Position(1, 3)),
        (Position(2, 4), Position(0, 0)),
        (Position(1, 5), Position(1, 2)),
        (Position(0, 3), Position(2, 6)),
    ],
)
def test_select_mode_delete_removes_text_between_anchor_and_cursor(
    anchor: Position, target: Position
) -> None:
    app = make_app(position=anchor)
    application.switch_to_select_mode(app)
    current(app).cursor.move_to(target)

    selection.delete(app)

    low, high = sorted((anchor, target))
    expected = TEXT[: flat_offset(TEXT, low)] + TEXT[flat_offset(TEXT, high) :]
    assert current(app).data() == expected
    assert current(app).cursor.position == low


@pytest.mark.parametrize(
    "anchor, target, expected",
    [
        (0, 0, "editor\nbuffer"),
        (1, 0, "buffer"),
        (2, 1, "amp\n"),
        (0, 2, ""),
        (2, 2, "amp\neditor\n"),
    ],
)
def test_select_line_mode_delete_removes_whole_lines(
    anchor: int, target: int, expected: str
) -> None:
    app = make_app(position=Position(anchor, 0))
    application.switch_to_select_line_mode(app)
    current(app).cursor.move_to(Position(target, 0))

    selection.delete(app)

    assert current(app).data() == expected
    assert current(app).cursor.position == Position(min(anchor, target), 0)


def test_delete_in_search_mode_without_a_result_fails() -> None:
    app = make_app()
    application.switch_to_search_mode(app)

    with pytest.raises(NoSelectionError):
        selection.delete(app)

    assert current(app).data() == TEXT


def test_delete_without_a_buffer_fails() -> None:
    app = make_app(None)

    with pytest.raises(BufferMissingError):
        selection.delete(app)


@pytest.mark.parametrize(
    "command", [selection.delete, selection.copy, selection.sort_lines]
)
@pytest.mark.parametrize(
    "enter_mode",
    [application.switch_to_normal_mode, application.switch_to_insert_mode],
)
def test_commands_refuse_non_selection_modes(
    command: Callable[[Application], None],
    enter_mode: Callable[[Application], None],
) -> None:
    app = make_app(position=Position(1, 2))
    enter_mode(app)
    mode_before = app.mode

    with pytest.raises(ModeMismatchError) as excinfo:
        command(app)

    assert "select" in str(excinfo.value)
    assert excinfo.value.mode == mode_before.name
    assert current(app).data() == TEXT
    assert app.mode is mode_before


def test_copy_stores_inline_content_and_returns_to_normal_mode() -> None:
    app = make_app(position=Position(1, 0))
    application.switch_to_select_mode(app)
    cursor.move_right(app)

    selection.copy(app)

    assert app.clipboard.content == Inline("e")
    assert isinstance(app.mode, NormalMode)
    assert current(app).data() == TEXT


def test_copy_stores_block_content_in_select_line_mode() -> None:
    app = make_app(position=Position(1, 0))
    application.switch_to_select_line_mode(app)
    buffer = current(app)
    expected = buffer.read(SelectLineMode(anchor=1).to_range(buffer))

    selection.copy(app)

    assert app.clipboard.content == Block("editor\n")
    assert app.clipboard.content.text == expected


def test_copy_in_search_mode_is_refused() -> None:
    app = make_app(position=Position(1, 0))
    app.clipboard.set_content(Inline("previous"))
    app.search_query = "ed"
    application.switch_to_search_mode(app)
    search.accept_query(app)

    with pytest.raises(
        ModeMismatchError, match="Can't copy data to clipboard outside of select"
    ):
        selection.copy(app)

    assert app.clipboard.content == Inline("previous")
    assert isinstance(app.mode, SearchMode)


def test_copy_and_delete_in_search_mode_keeps_the_clipboard() -> None:
    app = make_app(position=Position(1, 0))
    app.clipboard.set_content(Inline("previous"))
    app.search_query = "ed"
    application.switch_to_search_mode(app)
    search.accept_query(app)

    selection.copy_and_delete(app)

    assert current(app).data() == "amp\nitor\nbuffer"
    assert app.clipboard.content == Inline("previous")


def test_repeated_search_deletes_only_remove_live_matches() -> None:
    app = make_app("amp ed\neditor")
    app.search_query = "ed"
    application.switch_to_search_mode(app)
    search.accept_query(app)

    selection.delete(app)
    assert current(app).data() == "amp \neditor"
    selection.delete(app)
    assert current(app).data() == "amp \nitor"

    with pytest.raises(NoSelectionError):
        selection.delete(app)
    assert current(app).data() == "amp \nitor"


def test_second_search_delete_fails_once_the_match_is_gone() -> None:
    app = make_app(position=Position(1, 0))
    app.search_query = "or"
    application.switch_to_search_mode(app)
    search.accept_query(app)

    selection.delete(app)
    assert current(app).data() == "amp\nedit\nbuffer"

    with pytest.raises(NoSelectionError):
        selection.delete(app)
    assert current(app).data() == "amp\nedit\nbuffer"


def test_unreadable_selection_fails_copy_and_delete(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    app = make_app(position=Position(1, 0))
    application.switch_to_select_mode(app)
    cursor.move_right(app)
    monkeypatch.setattr(Buffer, "read", lambda self, range: None)

    with pytest.raises(RangeReadError, match="Couldn't read selected data"):
        selection.copy(app)
    with pytest.raises(RangeReadError) as excinfo:
        selection.delete(app)

    assert excinfo.value.range == Range(Position(1, 0), Position(1, 1))
    assert current(app).data() == TEXT
    assert app.clipboard.content is None
    assert isinstance(app.mode, SelectMode)


def test_copy_propagates_clipboard_failures_and_keeps_the_mode() -> None:
    app = make_app(
        position=Position(1, 0), clipboard=Clipboard(system=FailingClipboard())
    )
    application.switch_to_select_mode(app)
    cursor.move_right(app)

    with pytest.raises(ClipboardSyncError):
        selection.copy(app)

    assert isinstance(app.mode, SelectMode)
    assert app.clipboard.content is None


def test_copy_and_delete_moves_selection_to_the_clipboard() -> None:
    app = make_app(position=Position(1, 0))
    application.switch_to_select_line_mode(app)

    selection.copy_and_delete(app)

    assert app.clipboard.content == Block("editor\n")
    assert current(app).data() == "amp\nbuffer"


def test_copy_and_delete_deletes_even_when_clipboard_sync_fails() -> None:
    clipboard = Clipboard(system=FailingClipboard())
    clipboard.content = Inline("previous")
    app = make_app(position=Position(1, 0), clipboard=clipboard)
    application.switch_to_select_line_mode(app)

    selection.copy_and_delete(app)

    assert current(app).data() == "amp\nbuffer"
    assert app.clipboard.content == Inline("previous")


def test_copy_and_delete_propagates_delete_failures() -> None:
    app = make_app()

    with pytest.raises(ModeMismatchError):
        selection.copy_and_delete(app)

    assert app.clipboard.content is None
    assert current(app).data() == TEXT


def test_change_deletes_selection_and_enters_insert_mode() -> None:
    app = make_app(position=Position(1, 0))
    application.switch_to_select_mode(app)
    cursor.move_right(app)

    selection.change(app)

    assert current(app).data() == "amp\nditor\nbuffer"
    assert current(app).cursor.position == Position(1, 0)
    assert isinstance(app.mode, InsertMode)
    assert app.clipboard.content == Inline("e")


def test_change_scrolls_the_cursor_into_view() -> None:
    text = "\n".join(str(number) for number in range(10))
    app = make_app(text, position=Position(8, 0), view_height=2)
    application.switch_to_select_line_mode(app)

    selection.change(app)

    top, bottom = app.view.visible_range(current(app))
    assert top <= current(app).cursor.line < bottom
    assert app.view.scroll_offset(current(app)) == 7


def test_change_outside_select_modes_leaves_mode_alone() -> None:
    app = make_app()

    with pytest.raises(ModeMismatchError):
        selection.change(app)

    assert isinstance(app.mode, NormalMode)


def test_selection_events_are_published_on_the_bus() -> None:
    app = make_app(position=Position(1, 0))
    events: List[object] = []
    app.bus.subscribe("selection.copy", events.append)
    app.bus.subscribe("selection.delete", events.append)
    application.switch_to_select_line_mode(app)

    selection.copy_and_delete(app)

    assert events[0] == Block("editor\n")
    assert isinstance(events[1], dict)
    assert events[1]["text"] == "editor\n"
