"""Clipboard slot and system clipboard integration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import pyperclip

from modal_select.errors import ClipboardSyncError
from modal_select.runtime import telemetry


@dataclass(frozen=True, slots=True)
class ClipboardContent:
    text: str


@dataclass(frozen=True, slots=True)
class Inline(ClipboardContent):
    """Character-wise content; pasted at the cursor."""


@dataclass(frozen=True, slots=True)
class Block(ClipboardContent):
    """Line-wise content; pasted as whole lines."""


class ClipboardBackend(Protocol):
    def copy(self, text: str) -> None:
        ...

    def paste(self) -> str:
        ...


class SystemClipboard:
    """Backend syncing with the desktop clipboard through pyperclip."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardSyncError("Couldn't write to the system clipboard") from exc

    def paste(self) -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as exc:
            raise ClipboardSyncError("Couldn't read the system clipboard") from exc


class Clipboard:
    """Holds the most recently copied content; each copy replaces the last."""

    def __init__(self, *, system: Optional[ClipboardBackend] = None) -> None:
        self.content: Optional[ClipboardContent] = None
        self.system = system

    @classmethod
    def with_system_sync(cls, enabled: bool) -> "Clipboard":
        return cls(system=SystemClipboard() if enabled else None)

    def set_content(self, content: ClipboardContent) -> None:
        """Store ``content``; a failed system sync leaves the old content in place."""

        if self.system is not None:
            self.system.copy(content.text)
        self.content = content
        telemetry.record_event(
            "clipboard.set",
            level="debug",
            data={"kind": type(content).__name__, "length": len(content.text)},
            logger_name="modal_select.clipboard",
        )

    def get_content(self) -> Optional[ClipboardContent]:
        """Return stored content, preferring newer text from the system clipboard."""

        if self.system is None:
            return self.content
        text = self.system.paste()
        if text and (self.content is None or text != self.content.text):
            return Inline(text)
        return self.content


__all__ = [
    "ClipboardContent",
    "Inline",
    "Block",
    "ClipboardBackend",
    "SystemClipboard",
    "Clipboard",
]
