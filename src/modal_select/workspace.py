"""Open buffers and which one is current."""

from __future__ import annotations

from typing import List, Optional

from modal_select.buffer import Buffer


class Workspace:
    def __init__(self) -> None:
        self._buffers: List[Buffer] = []
        self._current: Optional[int] = None

    def __len__(self) -> int:
        return len(self._buffers)

    def add_buffer(self, buffer: Buffer) -> Buffer:
        """Append ``buffer`` and make it current."""

        self._buffers.append(buffer)
        self._current = len(self._buffers) - 1
        return buffer

    def current_buffer(self) -> Optional[Buffer]:
        if self._current is None:
            return None
        return self._buffers[self._current]

    def close_current_buffer(self) -> Optional[Buffer]:
        if self._current is None:
            return None
        closed = self._buffers.pop(self._current)
        if not self._buffers:
            self._current = None
        else:
            self._current = min(self._current, len(self._buffers) - 1)
        return closed


__all__ = ["Workspace"]
