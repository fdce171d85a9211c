"""Insert mode: text entry at the cursor."""

from __future__ import annotations

from dataclasses import dataclass

from .base_mode import Mode


@dataclass(slots=True)
class InsertMode(Mode):
    name = "insert"
