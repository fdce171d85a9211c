"""Application state shared by every command."""

from __future__ import annotations

from typing import Callable, Dict, Optional

from modal_select.buffer import Clipboard
from modal_select.modes import Mode, NormalMode
from modal_select.runtime.log import log_to_file
from modal_select.runtime.preferences import Preferences
from modal_select.view import View
from modal_select.workspace import Workspace


class EventBus:
    """Minimal event bus letting commands publish structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


class Application:
    """Owns the workspace, the active mode, and the clipboard slot."""

    def __init__(
        self,
        *,
        preferences: Optional[Preferences] = None,
        clipboard: Optional[Clipboard] = None,
        workspace: Optional[Workspace] = None,
        view: Optional[View] = None,
    ) -> None:
        self.preferences = preferences or Preferences.from_env()
        if self.preferences.log_to_file:
            log_to_file(self.preferences)
        self.clipboard = clipboard or Clipboard.with_system_sync(
            self.preferences.system_clipboard
        )
        self.workspace = workspace or Workspace()
        self.view = view or View(height=self.preferences.view_height)
        self.mode: Mode = NormalMode()
        self.search_query: Optional[str] = None
        self.bus = EventBus()


__all__ = ["Application", "EventBus"]
