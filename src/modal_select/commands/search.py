"""Search commands operating on the active search mode."""

from __future__ import annotations

from typing import Optional

from modal_select.application import Application
from modal_select.buffer import Range
from modal_select.errors import CommandError, ModeMismatchError, NoSelectionError
from modal_select.modes import SearchMode
from modal_select.search import SearchResults

from .helpers import require_buffer


def accept_query(app: Application) -> None:
    """Run the typed query, select the closest match and leave query entry."""

    buffer = require_buffer(app)
    mode = _search_mode(app)
    query = mode.input or app.search_query
    if not query:
        raise CommandError("No search query")

    app.search_query = query
    mode.input = query
    mode.insert = False
    mode.results = SearchResults.find(buffer, query)
    _move_to(app, mode.results.select_closest(buffer.cursor.position), query)


def select_next_result(app: Application) -> None:
    mode = _search_mode(app)
    if mode.results is None:
        raise NoSelectionError("No search query has been accepted")
    _move_to(app, mode.results.select_next(), app.search_query or "")


def select_previous_result(app: Application) -> None:
    mode = _search_mode(app)
    if mode.results is None:
        raise NoSelectionError("No search query has been accepted")
    _move_to(app, mode.results.select_previous(), app.search_query or "")


def _search_mode(app: Application) -> SearchMode:
    if not isinstance(app.mode, SearchMode):
        raise ModeMismatchError(
            "Can't run search commands outside of search mode", mode=app.mode.name
        )
    return app.mode


def _move_to(app: Application, match: Optional[Range], query: str) -> None:
    if match is None:
        raise NoSelectionError(f"No matches found for '{query}'")
    require_buffer(app).cursor.move_to(match.start)


__all__ = ["accept_query", "select_next_result", "select_previous_result"]
