"""Interaction modes the selection commands dispatch on."""

from .base_mode import Mode
from .insert_mode import InsertMode
from .normal_mode import NormalMode
from .search_mode import SearchMode
from .select_line_mode import SelectLineMode
from .select_mode import SelectMode

__all__ = [
    "Mode",
    "NormalMode",
    "InsertMode",
    "SelectMode",
    "SelectLineMode",
    "SearchMode",
]
