"""Helpers shared by command modules."""

from __future__ import annotations

from modal_select.application import Application
from modal_select.buffer import Buffer
from modal_select.errors import BufferMissingError


def require_buffer(app: Application) -> Buffer:
    buffer = app.workspace.current_buffer()
    if buffer is None:
        raise BufferMissingError()
    return buffer


__all__ = ["require_buffer"]
