"""
Tests for read_workbook.

Workbooks are built in memory with openpyxl; CSV buffers are plain bytes.
"""

import datetime
import io

import pytest
from openpyxl import Workbook

from compliance_parser.excel_parser.read_workbook import coerce_csv_value, get_cell, has_row, read_workbook
from compliance_parser.exceptions import ParseError


def save(wb) -> bytes:
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


class TestXlsx:
    def test_sheets_in_workbook_order(self):
        wb = Workbook()
        wb.active.title = "Guidelines"
        wb.create_sheet("Kollam")
        wb.create_sheet("Thrissur")

        sheets = read_workbook(save(wb))

        assert [name for name, _ in sheets] == ["Guidelines", "Kollam", "Thrissur"]

    def test_cells_are_zero_based_and_trimmed(self):
        wb = Workbook()
        ws = wb.active
        ws["C2"] = "Village"
        ws["D2"] = "Anchal"
        ws["A4"] = 0.5

        (_, grid), = read_workbook(save(wb))

        assert grid[0] == []
        assert grid[1] == [None, None, "Village", "Anchal"]
        assert grid[2] == []
        assert grid[3] == [0.5]
        assert len(grid) == 4

    def test_dates_become_serial_numbers(self):
        wb = Workbook()
        wb.active["A1"] = datetime.datetime(2023, 3, 15)

        (_, grid), = read_workbook(save(wb))

        assert grid[0][0] == 45000

    def test_error_markers_are_strings(self):
        wb = Workbook()
        wb.active["A1"] = "#REF!"

        (_, grid), = read_workbook(save(wb))

        assert grid[0][0] == "#REF!"


class TestCsv:
    def test_single_sheet_with_coerced_values(self):
        buffer = "Village,Anchal\nscore,0.75\ndone,Yes\ndays,95\n".encode("utf-8")

        sheets = read_workbook(buffer)

        assert len(sheets) == 1
        name, grid = sheets[0]
        assert name == "Sheet1"
        assert grid == [["Village", "Anchal"], ["score", 0.75], ["done", "Yes"], ["days", 95]]

    @pytest.mark.parametrize(
        "text, expected",
        [("", None), ("  ", None), ("12", 12), ("-3", -3), ("0.5", 0.5), (".5", 0.5), ("1e2", 100.0),
         ("90%", 0.9), ("TRUE", True), ("false", False), ("Ready", "Ready"), ("9(2)", "9(2)")],
    )
    def test_coerce_csv_value(self, text, expected):
        assert coerce_csv_value(text) == expected


class TestFailures:
    def test_empty_buffer(self):
        with pytest.raises(ParseError):
            read_workbook(b"")

    def test_corrupt_zip(self):
        with pytest.raises(ParseError) as exc_info:
            read_workbook(b"PK\x03\x04 definitely not a workbook")

        assert exc_info.value.cause is not None

    def test_undecodable_bytes(self):
        with pytest.raises(ParseError) as exc_info:
            read_workbook(b"\xff\xfe\x00\x81\x9f")

        assert isinstance(exc_info.value.cause, UnicodeDecodeError)


def test_get_cell_and_has_row():
    grid = [[1, 2], [], [None, None, 3]]

    assert get_cell(grid, 0, 1) == 2
    assert get_cell(grid, 1, 0) is None
    assert get_cell(grid, 2, 2) == 3
    assert get_cell(grid, 5, 0) is None
    assert get_cell(grid, -1, 0) is None
    assert has_row(grid, 1)
    assert not has_row(grid, 3)
