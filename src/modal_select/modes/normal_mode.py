"""Normal mode: navigation without a selection."""

from __future__ import annotations

from dataclasses import dataclass

from .base_mode import Mode


@dataclass(slots=True)
class NormalMode(Mode):
    name = "normal"
