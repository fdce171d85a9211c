"""Search mode: query entry and navigation between matches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from modal_select.buffer import Range
from modal_select.search import SearchResults

from .base_mode import Mode


@dataclass(slots=True)
class SearchMode(Mode):
    name = "search"

    insert: bool = True
    input: str = ""
    results: Optional[SearchResults] = None

    def selection(self) -> Optional[Range]:
        """Currently selected match, if a query was accepted and matched."""

        if self.results is None:
            return None
        return self.results.selection()
