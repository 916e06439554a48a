import argparse
import sys
from pathlib import Path
from typing import List, Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from pydantic import ValidationError

from sheetcsv.config import get_settings
from sheetcsv.converter import convert
from sheetcsv.errors import SheetCsvError
from sheetcsv.logger import get_logger, set_level
from sheetcsv.reader import open_workbook
from sheetcsv.targets import parse_target, resolve_output

logger = get_logger("sheetcsv.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetcsv",
        description="Stream one sheet of an Excel workbook into a CSV file.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Input workbook (.xlsx/.xlsm/.xls), or '-' to read from stdin.",
    )
    parser.add_argument(
        "-o",
        dest="output",
        default=None,
        help="Path to the output CSV file. Use '-' for stdout. "
        "Defaults to <input_filename>.csv (stdout when reading stdin).",
    )
    parser.add_argument(
        "-sheet-index",
        "--sheet-index",
        dest="sheet_index",
        type=int,
        default=0,
        help="0-based index of the sheet to convert (default: 0).",
    )
    parser.add_argument(
        "--list-sheets",
        action="store_true",
        help="Print the index and name of every sheet, then exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def list_sheets(input_arg: str) -> None:
    workbook = open_workbook(parse_target(input_arg))
    try:
        for index, name in enumerate(workbook.sheet_names):
            print(f"{index}\t{name}")
    finally:
        try:
            workbook.close()
        except Exception as exc:
            logger.error("Error closing Excel file: %s", exc)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.input is None:
        parser.print_usage(sys.stderr)
        return 0

    try:
        settings = get_settings()
    except ValidationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    set_level("DEBUG" if args.verbose else settings.LOG_LEVEL)

    try:
        if args.list_sheets:
            list_sheets(args.input)
            return 0

        input_target = parse_target(args.input)
        output_target = resolve_output(args.output, input_target, settings.OUTPUT_EXTENSION)
        convert(input_target, output_target, args.sheet_index, settings=settings)
    except SheetCsvError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
