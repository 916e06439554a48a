"""
WorkbookReader: workbook I/O and sheet access.

Encapsulates:
- openpyxl vs xlrd engine selection (by suffix, or by sniffing stdin bytes)
- Sheet listing and bounds-checked selection by ordinal
- Lazy, forward-only row streaming with per-row error reporting
"""

from __future__ import annotations

import io
import sys
from typing import Any, Iterator, List, Optional, Sequence

from openpyxl import load_workbook

from sheetcsv.cells import CellCleaner
from sheetcsv.errors import InputOpenError, RowReadError, SheetIndexError
from sheetcsv.logger import get_logger
from sheetcsv.targets import FilePath, Target

logger = get_logger(__name__)

# Compound File Binary header shared by every legacy .xls workbook
OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


class RowStream:
    """
    Single-pass iterator over the rows of one sheet.

    Yields each row as a list of strings with trailing empty cells removed,
    so rows of the same sheet may differ in length. A row that cannot be
    converted raises ``RowReadError`` and iteration may continue with the
    next row. If the underlying library iterator fails, that failure is
    reported as ``RowReadError`` too and the stream ends.
    """

    def __init__(self, raw_rows: Iterator[Sequence[Any]]):
        self._raw = raw_rows
        self._exhausted = False
        self.row_number = 0

    def __iter__(self) -> "RowStream":
        return self

    def __next__(self) -> List[str]:
        if self._exhausted:
            raise StopIteration
        try:
            raw = next(self._raw)
        except StopIteration:
            self._exhausted = True
            raise
        except Exception as exc:
            self._exhausted = True
            self.row_number += 1
            raise RowReadError(self.row_number, exc) from exc

        self.row_number += 1
        try:
            return CellCleaner.row_to_strs(raw)
        except Exception as exc:
            raise RowReadError(self.row_number, exc) from exc

    def close(self) -> None:
        self._exhausted = True
        close = getattr(self._raw, "close", None)
        if close is not None:
            close()


class WorkbookReader:
    """
    An open workbook.

    ``backend`` is ``"openpyxl"`` for xlsx/xlsm containers and ``"xlrd"``
    for legacy .xls files. Use ``open_workbook`` to construct one.
    """

    def __init__(self, handle: Any, backend: str):
        self._wb = handle
        self.backend = backend

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def sheet_names(self) -> List[str]:
        if self.backend == "xlrd":
            return list(self._wb.sheet_names())
        return list(self._wb.sheetnames or [])

    def select_sheet(self, index: int) -> str:
        """Return the name of the sheet at ``index``; raise ``SheetIndexError`` if out of range."""
        names = self.sheet_names
        if index < 0 or index >= len(names):
            raise SheetIndexError(index, len(names))
        return names[index]

    def rows(self, sheet_name: str) -> RowStream:
        if self.backend == "xlrd":
            return RowStream(self._xlrd_rows(sheet_name))
        ws = self._wb[sheet_name]
        if not hasattr(ws, "iter_rows"):
            # Chartsheets carry no cells.
            logger.debug("Sheet '%s' is not a worksheet; treating it as empty", sheet_name)
            return RowStream(iter(()))
        if hasattr(ws, "reset_dimensions"):
            # Some writers store a bogus <dimension>; read rows as they are stored.
            ws.reset_dimensions()
        return RowStream(ws.iter_rows(values_only=True))

    def close(self) -> None:
        if self.backend == "xlrd":
            self._wb.release_resources()
        else:
            self._wb.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _xlrd_rows(self, sheet_name: str) -> Iterator[List[Any]]:
        ws = self._wb.sheet_by_name(sheet_name)
        for ri in range(ws.nrows):
            yield ws.row_values(ri)


def open_workbook(target: Target) -> WorkbookReader:
    """
    Open ``target`` as a workbook.

    A ``FilePath`` ending in ``.xls`` is read with xlrd, any other path with
    openpyxl in read-only mode. For stdin the whole stream is buffered (both
    libraries need a seekable source) and the container type is sniffed.
    Any failure is reported as ``InputOpenError``.
    """
    try:
        if isinstance(target, FilePath):
            if target.path.suffix.lower() == ".xls":
                return _open_xls(filename=str(target.path))
            return _open_xlsx(str(target.path))

        logger.info("Reading Excel data from stdin...")
        stdin = getattr(sys.stdin, "buffer", sys.stdin)
        data = stdin.read()
        if data.startswith(OLE2_MAGIC):
            return _open_xls(file_contents=data)
        return _open_xlsx(io.BytesIO(data))
    except Exception as exc:
        raise InputOpenError(f"Failed to open Excel input: {exc}") from exc


def _open_xlsx(source: Any) -> WorkbookReader:
    wb = load_workbook(source, read_only=True, data_only=True)
    return WorkbookReader(wb, "openpyxl")


def _open_xls(filename: Optional[str] = None, file_contents: Optional[bytes] = None) -> WorkbookReader:
    import xlrd
    if file_contents is not None:
        wb = xlrd.open_workbook(file_contents=file_contents, on_demand=True)
    else:
        wb = xlrd.open_workbook(filename, on_demand=True)
    return WorkbookReader(wb, "xlrd")
