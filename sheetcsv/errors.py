"""
Exceptions raised by the conversion pipeline.

Everything except ``RowReadError`` is fatal: the run stops and the CLI exits
with a non-zero status after logging the message. ``RowReadError`` concerns
a single row, which the pipeline logs and skips.
"""

from typing import Optional


class SheetCsvError(Exception):
    """Base class for all sheetcsv errors."""


class InputOpenError(SheetCsvError):
    """The input could not be opened or parsed as a workbook."""


class OutputCreateError(SheetCsvError):
    """The output file could not be created."""


class SheetIndexError(SheetCsvError):
    """The requested sheet ordinal is outside the workbook's sheet list."""

    def __init__(self, index: int, sheet_count: int):
        self.index = index
        self.sheet_count = sheet_count
        super().__init__(
            f"sheet-index {index} is out of bounds. The workbook has {sheet_count} "
            f"sheets (indices 0 to {sheet_count - 1})."
        )


class HeaderReadError(SheetCsvError):
    """The first row of the sheet could not be read."""


class WriteError(SheetCsvError):
    """At least one CSV write failed during the run."""


class RowReadError(SheetCsvError):
    """One row could not be read from the sheet."""

    def __init__(self, row_number: int, cause: Optional[BaseException] = None):
        self.row_number = row_number
        self.cause = cause
        super().__init__(f"row {row_number}: {cause}")
