from datetime import date, datetime, time

from sheetcsv.cells import CellCleaner


class DummyText:
    text = "Employee ID"


class DummyPlain:
    plain = "Full name"


class DummyStr:
    def __str__(self) -> str:
        return "Start date"


def test_cell_to_str_richtext_like_text() -> None:
    assert CellCleaner.cell_to_str(DummyText()) == "Employee ID"


def test_cell_to_str_richtext_like_plain() -> None:
    assert CellCleaner.cell_to_str(DummyPlain()) == "Full name"


def test_cell_to_str_str_fallback() -> None:
    assert CellCleaner.cell_to_str(DummyStr()) == "Start date"


def test_cell_to_str_scalars() -> None:
    assert CellCleaner.cell_to_str(None) == ""
    assert CellCleaner.cell_to_str("  keep spaces ") == "  keep spaces "
    assert CellCleaner.cell_to_str(True) == "TRUE"
    assert CellCleaner.cell_to_str(False) == "FALSE"
    assert CellCleaner.cell_to_str(42) == "42"
    assert CellCleaner.cell_to_str(3.0) == "3"
    assert CellCleaner.cell_to_str(2.5) == "2.5"


def test_cell_to_str_temporal_values() -> None:
    assert CellCleaner.cell_to_str(datetime(2024, 3, 15, 8, 30, 5)) == "2024-03-15 08:30:05"
    assert CellCleaner.cell_to_str(date(2024, 3, 15)) == "2024-03-15"
    assert CellCleaner.cell_to_str(time(8, 30)) == "08:30:00"


def test_row_to_strs_trims_trailing_empty_cells() -> None:
    assert CellCleaner.row_to_strs(["a", None, "c", None, ""]) == ["a", "", "c"]
    assert CellCleaner.row_to_strs([None, None]) == []
