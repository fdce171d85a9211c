"""Mode transitions requested by commands."""

from __future__ import annotations

from modal_select.application import Application
from modal_select.modes import (
    InsertMode,
    Mode,
    NormalMode,
    SearchMode,
    SelectLineMode,
    SelectMode,
)
from modal_select.runtime import telemetry

from .helpers import require_buffer


def switch_to_normal_mode(app: Application) -> None:
    _switch(app, NormalMode())


def switch_to_insert_mode(app: Application) -> None:
    require_buffer(app)
    _switch(app, InsertMode())


def switch_to_select_mode(app: Application) -> None:
    buffer = require_buffer(app)
    _switch(app, SelectMode(anchor=buffer.cursor.position))


def switch_to_select_line_mode(app: Application) -> None:
    buffer = require_buffer(app)
    _switch(app, SelectLineMode(anchor=buffer.cursor.line))


def switch_to_search_mode(app: Application) -> None:
    require_buffer(app)
    _switch(app, SearchMode(input=app.search_query or ""))


def _switch(app: Application, mode: Mode) -> None:
    previous = app.mode.name
    app.mode = mode
    payload = {"from": previous, "to": mode.name}
    telemetry.record_event("mode.switch", data=payload)
    app.bus.emit("mode.switch", payload)


__all__ = [
    "switch_to_normal_mode",
    "switch_to_insert_mode",
    "switch_to_select_mode",
    "switch_to_select_line_mode",
    "switch_to_search_mode",
]
