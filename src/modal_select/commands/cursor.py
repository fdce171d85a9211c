"""Cursor movement commands."""

from __future__ import annotations

from modal_select.application import Application

from .helpers import require_buffer


def move_left(app: Application) -> None:
    require_buffer(app).cursor.move_left()


def move_right(app: Application) -> None:
    require_buffer(app).cursor.move_right()


def move_up(app: Application) -> None:
    require_buffer(app).cursor.move_up()


def move_down(app: Application) -> None:
    require_buffer(app).cursor.move_down()


def move_to_first_line(app: Application) -> None:
    require_buffer(app).cursor.move_to_first_line()


def move_to_last_line(app: Application) -> None:
    require_buffer(app).cursor.move_to_last_line()


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "move_to_first_line",
    "move_to_last_line",
]
