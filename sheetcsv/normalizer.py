"""Row normalization: force every record to the header's width."""

from __future__ import annotations

from typing import List, Sequence, Tuple

PAD_VALUE = ""


def normalize_row(row: Sequence[str], column_count: int) -> Tuple[List[str], int]:
    """
    Pad ``row`` on the right with empty strings, or truncate it, so that it
    has exactly ``column_count`` fields.

    Returns ``(record, original_length)``; callers compare the two lengths
    to detect truncation.
    """
    original_length = len(row)
    if original_length < column_count:
        record = list(row) + [PAD_VALUE] * (column_count - original_length)
    else:
        record = list(row[:column_count])
    return record, original_length
