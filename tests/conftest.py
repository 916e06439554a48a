"""
Pytest configuration and shared fixtures.
"""
import logging
import os
import sys
from typing import List, Optional

import pytest
from openpyxl import Workbook

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)


@pytest.fixture
def sheetcsv_logs(caplog):
    """caplog wired to the project logger, which does not propagate to root."""
    logger = logging.getLogger("sheetcsv")
    logger.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="sheetcsv")
    yield caplog
    logger.removeHandler(caplog.handler)


@pytest.fixture
def write_xlsx():
    """Save a workbook whose sheets are given as ``{title: rows}``."""

    def _write(path, sheets: dict):
        wb = Workbook()
        wb.remove(wb.active)
        for title, rows in sheets.items():
            ws = wb.create_sheet(title)
            for row in rows:
                ws.append(list(row))
        wb.save(str(path))
        return path

    return _write


class FakeWorkbook:
    """Stands in for WorkbookReader so tests can inject raw rows."""

    backend = "fake"

    def __init__(self, sheets: dict, close_error: Optional[Exception] = None):
        self._sheets = sheets
        self._close_error = close_error
        self.closed = False

    @property
    def sheet_names(self) -> List[str]:
        return list(self._sheets)

    def select_sheet(self, index: int) -> str:
        from sheetcsv.errors import SheetIndexError

        names = self.sheet_names
        if index < 0 or index >= len(names):
            raise SheetIndexError(index, len(names))
        return names[index]

    def rows(self, sheet_name: str):
        from sheetcsv.reader import RowStream

        return RowStream(iter(self._sheets[sheet_name]))

    def close(self) -> None:
        self.closed = True
        if self._close_error is not None:
            raise self._close_error


@pytest.fixture
def fake_workbook():
    return FakeWorkbook
