"""
sheetcsv: stream one workbook sheet into CSV.

Public API:
  - convert / ConversionResult   (the pipeline, in converter.py)
  - open_workbook / WorkbookReader / RowStream   (workbook access)
  - normalize_row                (pad / truncate to header width)
  - CsvRecordWriter / open_output
  - StandardStream / FilePath / parse_target / resolve_output
  - Settings / get_settings
"""

from sheetcsv.config import Settings, get_settings
from sheetcsv.converter import ConversionResult, convert
from sheetcsv.errors import (
    HeaderReadError,
    InputOpenError,
    OutputCreateError,
    RowReadError,
    SheetCsvError,
    SheetIndexError,
    WriteError,
)
from sheetcsv.normalizer import normalize_row
from sheetcsv.reader import RowStream, WorkbookReader, open_workbook
from sheetcsv.targets import FilePath, StandardStream, parse_target, resolve_output
from sheetcsv.writer import CsvRecordWriter, open_output

__all__ = [
    "Settings",
    "get_settings",
    "ConversionResult",
    "convert",
    "SheetCsvError",
    "InputOpenError",
    "OutputCreateError",
    "SheetIndexError",
    "HeaderReadError",
    "WriteError",
    "RowReadError",
    "normalize_row",
    "RowStream",
    "WorkbookReader",
    "open_workbook",
    "FilePath",
    "StandardStream",
    "parse_target",
    "resolve_output",
    "CsvRecordWriter",
    "open_output",
]
