"""
CellCleaner: cell value -> CSV text.

Workbook libraries hand over typed values (numbers, datetimes, booleans,
rich text). The CSV carries text only, so every cell goes through
``cell_to_str`` on its way out. Cell content is not trimmed or otherwise
altered beyond stringification.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from typing import Any, List, Sequence


class CellCleaner:
    """Stateless helpers for turning raw cells into CSV fields."""

    @staticmethod
    def cell_to_str(value: Any) -> str:
        """Convert an arbitrary cell value to text."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "TRUE" if value else "FALSE"
        if isinstance(value, float):
            if math.isfinite(value) and value.is_integer():
                return str(int(value))
            return repr(value)
        if isinstance(value, int):
            return str(value)
        if isinstance(value, datetime):
            return value.isoformat(sep=" ", timespec="seconds")
        if isinstance(value, (date, time)):
            return value.isoformat()
        # Rich-text objects from openpyxl may expose .plain or .text
        plain_attr = getattr(value, "plain", None)
        if isinstance(plain_attr, str):
            return plain_attr
        text_attr = getattr(value, "text", None)
        if isinstance(text_attr, str):
            return text_attr
        return str(value)

    @staticmethod
    def trim_trailing_empty(cells: Sequence[str]) -> List[str]:
        """Drop empty cells after the last non-empty one."""
        end = len(cells)
        while end > 0 and cells[end - 1] == "":
            end -= 1
        return list(cells[:end])

    @classmethod
    def row_to_strs(cls, row: Sequence[Any]) -> List[str]:
        return cls.trim_trailing_empty([cls.cell_to_str(c) for c in row])
