"""Base class for the editor's interaction modes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(slots=True)
class Mode:
    """One variant of the closed set of interaction modes.

    The application holds exactly one mode at a time and swaps it on
    transition; commands dispatch on the concrete class.
    """

    name: ClassVar[str] = "mode"
