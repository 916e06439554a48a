"""
CsvRecordWriter: CSV output with accumulated error state.

Write and flush failures never raise. The first one is kept in
``writer.error`` so the pipeline can log per-row failures, keep going, and
still fail the run at the end if anything was lost.
"""

from __future__ import annotations

import csv
import io
import sys
from typing import Optional, Sequence, TextIO

from sheetcsv.errors import OutputCreateError
from sheetcsv.logger import get_logger
from sheetcsv.targets import FilePath, Target

logger = get_logger(__name__)


class CsvRecordWriter:
    def __init__(self, stream: TextIO, close_stream: bool = False, detach_stream: bool = False):
        self._stream = stream
        self._close_stream = close_stream
        self._detach_stream = detach_stream
        self._csv = csv.writer(stream, lineterminator="\n")
        self.error: Optional[BaseException] = None
        self.records_written = 0

    def _record_error(self, exc: BaseException) -> None:
        if self.error is None:
            self.error = exc

    def write(self, record: Sequence[str]) -> Optional[BaseException]:
        """Write one record; return the exception on failure, ``None`` on success."""
        try:
            self._csv.writerow(record)
        except (OSError, csv.Error, UnicodeEncodeError) as exc:
            self._record_error(exc)
            return exc
        self.records_written += 1
        return None

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as exc:
            self._record_error(exc)

    def close(self) -> None:
        """Flush, then close the stream if it is a file we opened."""
        self.flush()
        if self._detach_stream:
            # Leave the process stdout buffer open for whoever comes next.
            try:
                self._stream.detach()
            except (OSError, ValueError) as exc:
                logger.error("Error releasing stdout: %s", exc)
            return
        if not self._close_stream:
            return
        try:
            self._stream.close()
        except OSError as exc:
            logger.error("Error closing output file: %s", exc)


def open_output(target: Target, encoding: str = "utf-8") -> CsvRecordWriter:
    """
    Create the output file, or wrap stdout, and return a writer for it.

    stdout is re-wrapped over its byte buffer so the CSV is written in
    ``encoding`` whatever the console encoding is.
    """
    if isinstance(target, FilePath):
        try:
            stream = open(target.path, "w", newline="", encoding=encoding)
        except (OSError, LookupError) as exc:
            raise OutputCreateError(f"Failed to create CSV file {target.path}: {exc}") from exc
        return CsvRecordWriter(stream, close_stream=True)
    stdout = sys.stdout
    buffer = getattr(stdout, "buffer", None)
    if buffer is None:
        return CsvRecordWriter(stdout, close_stream=False)
    stdout.flush()
    try:
        stream = io.TextIOWrapper(buffer, encoding=encoding, newline="")
    except LookupError as exc:
        raise OutputCreateError(f"Failed to open stdout for CSV: {exc}") from exc
    return CsvRecordWriter(stream, close_stream=False, detach_stream=True)
