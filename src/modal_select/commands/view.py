"""Viewport commands."""

from __future__ import annotations

from modal_select.application import Application

from .helpers import require_buffer


def scroll_to_cursor(app: Application) -> None:
    app.view.scroll_to_cursor(require_buffer(app))


__all__ = ["scroll_to_cursor"]
