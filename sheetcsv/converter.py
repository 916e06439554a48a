"""
Sheet-to-CSV conversion pipeline.

One linear pass:
  open workbook -> select sheet -> create output -> read header
  -> stream, normalize and write rows -> finalize

Fatal conditions raise a ``SheetCsvError`` subclass. Per-row problems are
logged and the run continues. Resources (workbook, output, row iterator)
are released in ``finally`` blocks on every exit path; failures while
releasing are only logged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sheetcsv.config import Settings, get_settings
from sheetcsv.errors import HeaderReadError, RowReadError, WriteError
from sheetcsv.logger import get_logger
from sheetcsv.normalizer import normalize_row
from sheetcsv.reader import WorkbookReader, open_workbook
from sheetcsv.targets import Target, describe
from sheetcsv.writer import CsvRecordWriter, open_output

logger = get_logger(__name__)


@dataclass
class ConversionResult:
    sheet_name: str
    sheet_index: int
    column_count: int = 0
    rows_read: int = 0
    rows_written: int = 0
    rows_skipped: int = 0
    rows_truncated: int = 0
    empty_sheet: bool = False


def convert(
    input_target: Target,
    output_target: Target,
    sheet_index: int = 0,
    settings: Optional[Settings] = None,
) -> ConversionResult:
    """
    Convert sheet ``sheet_index`` of ``input_target`` into CSV at ``output_target``.

    Raises:
        InputOpenError: the input is not a readable workbook
        SheetIndexError: ``sheet_index`` is outside the sheet list
        OutputCreateError: the output file cannot be created
        HeaderReadError: the first row cannot be read
        WriteError: any record failed to write during the run
    """
    settings = settings or get_settings()

    workbook = open_workbook(input_target)
    try:
        sheet_name = workbook.select_sheet(sheet_index)
        logger.debug(
            "Opened workbook via %s; sheets=%s", workbook.backend, workbook.sheet_names,
        )

        writer = open_output(output_target, settings.OUTPUT_ENCODING)
        try:
            logger.info(
                "Converting sheet '%s' (index %d) from %s to %s...",
                sheet_name,
                sheet_index,
                describe(input_target, is_input=True),
                describe(output_target, is_input=False),
            )
            result = _stream_sheet(
                workbook, sheet_name, sheet_index, writer, settings.PROGRESS_INTERVAL,
            )
        finally:
            writer.close()

        if writer.error is not None:
            raise WriteError(f"An error occurred during CSV writing: {writer.error}")
    finally:
        _close_workbook(workbook)

    if not result.empty_sheet:
        logger.info("Conversion complete! Successfully wrote %d rows.", result.rows_written)
    return result


def _stream_sheet(
    workbook: WorkbookReader,
    sheet_name: str,
    sheet_index: int,
    writer: CsvRecordWriter,
    progress_interval: int,
) -> ConversionResult:
    result = ConversionResult(sheet_name=sheet_name, sheet_index=sheet_index)
    rows = workbook.rows(sheet_name)
    try:
        # --- Header fixes the column count for the rest of the run ---
        try:
            header = next(rows)
        except StopIteration:
            logger.warning("Sheet '%s' is empty.", sheet_name)
            result.empty_sheet = True
            return result
        except RowReadError as exc:
            raise HeaderReadError(f"Failed to read header row: {exc.cause}") from exc

        column_count = len(header)
        result.column_count = column_count
        _write_record(writer, header, rows.row_number)
        _report_progress(writer, rows.row_number, progress_interval)

        # --- Remaining rows ---
        while True:
            try:
                row = next(rows)
            except StopIteration:
                break
            except RowReadError as exc:
                result.rows_skipped += 1
                logger.error("Error reading row %d: %s", exc.row_number, exc.cause)
                continue

            record, original_length = normalize_row(row, column_count)
            if original_length > column_count:
                result.rows_truncated += 1
                logger.warning(
                    "Row %d has %d columns, more than header's %d. Truncating.",
                    rows.row_number, original_length, column_count,
                )
            _write_record(writer, record, rows.row_number)
            _report_progress(writer, rows.row_number, progress_interval)
    finally:
        result.rows_read = rows.row_number
        result.rows_written = writer.records_written
        try:
            rows.close()
        except Exception as exc:
            logger.error("Error closing row iterator: %s", exc)

    return result


def _write_record(writer: CsvRecordWriter, record, row_number: int) -> None:
    err = writer.write(record)
    if err is not None:
        logger.error("Error writing row %d to CSV: %s", row_number, err)


def _report_progress(writer: CsvRecordWriter, row_number: int, progress_interval: int) -> None:
    if row_number % progress_interval == 0:
        logger.info("... processed %d rows", row_number)
        writer.flush()


def _close_workbook(workbook: WorkbookReader) -> None:
    try:
        workbook.close()
    except Exception as exc:
        logger.error("Error closing Excel file: %s", exc)
