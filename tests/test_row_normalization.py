from sheetcsv.normalizer import normalize_row


def test_short_row_is_padded_on_the_right():
    record, length = normalize_row(["1", "2"], 4)
    assert record == ["1", "2", "", ""]
    assert length == 2


def test_long_row_keeps_first_fields():
    record, length = normalize_row(["a", "b", "c", "d", "e"], 3)
    assert record == ["a", "b", "c"]
    assert length == 5


def test_exact_width_row_is_unchanged_copy():
    row = ["x", "y"]
    record, length = normalize_row(row, 2)
    assert record == row
    assert record is not row
    assert length == 2


def test_empty_row_becomes_all_pad():
    record, _ = normalize_row([], 3)
    assert record == ["", "", ""]
