# compliance_parser/excel_parser/read_workbook.py

"""
Decoding of a workbook buffer into plain cell grids.

Purpose:
    Every downstream extractor works on a `Grid`: a list of rows, each row a
    list of raw cell values, addressed with 0-based (row, column) indices.
    Row 0 / column 0 correspond to the spreadsheet cell A1.

    This module is the only place that knows about file formats:

    - `.xlsx` / `.xlsm` buffers (ZIP containers) are read with openpyxl in
      `data_only` mode, so formula cells yield their cached values
      and error cells yield their marker strings (e.g. "#REF!").
      Date-formatted cells are converted back to spreadsheet serial numbers,
      because the checklist treats dates as numbers.
    - Any other buffer is decoded as UTF-8 CSV text and exposed as a single
      sheet named "Sheet1". Numeric and TRUE/FALSE text is coerced the way
      spreadsheet applications do when opening a CSV file.

    Trailing empty cells of a row and trailing empty rows of a sheet are
    dropped, so `len(grid)` is the used height of the sheet.
"""

import csv
import datetime
import io
import logging
import re
from typing import Any, Iterable, List, Tuple

import openpyxl
from openpyxl.utils.datetime import to_excel

from ..exceptions import ParseError

log = logging.getLogger(__name__)

Grid = List[List[Any]]

ZIP_SIGNATURE = b"PK\x03\x04"
CSV_SHEET_NAME = "Sheet1"

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_PERCENT_RE = re.compile(r"^([+-]?(\d+\.?\d*|\.\d+))\s*%$")


def get_cell(grid: Grid, row: int, column: int) -> Any:
    """Returns the raw value at (row, column), or None outside the grid."""
    if row < 0 or column < 0 or row >= len(grid):
        return None
    cells = grid[row]
    if cells is None or column >= len(cells):
        return None
    return cells[column]


def has_row(grid: Grid, row: int) -> bool:
    """True if the sheet has any data at this row index."""
    return 0 <= row < len(grid) and grid[row] is not None


def _convert_xlsx_value(value: Any) -> Any:
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)):
        return to_excel(value)
    return value


def _trim_rows(rows: Iterable[Iterable[Any]], convert) -> Grid:
    grid: Grid = []
    for row in rows:
        cells = [convert(value) for value in row]
        while cells and cells[-1] is None:
            cells.pop()
        grid.append(cells)
    while grid and not grid[-1]:
        grid.pop()
    return grid


def _read_xlsx(buffer: bytes) -> List[Tuple[str, Grid]]:
    wb = openpyxl.load_workbook(io.BytesIO(buffer), data_only=True)

    sheets: List[Tuple[str, Grid]] = []
    for sheet_name in wb.sheetnames:
        ws = wb[sheet_name]
        if not hasattr(ws, "iter_rows"):
            # Chartsheets carry no cells but still occupy a sheet index
            sheets.append((sheet_name, []))
            continue
        sheets.append((sheet_name, _trim_rows(ws.iter_rows(values_only=True), _convert_xlsx_value)))
    return sheets


def coerce_csv_value(text: str) -> Any:
    """Converts one CSV field into the value a spreadsheet would show."""
    stripped = text.strip()
    if not stripped:
        return None
    if _INT_RE.match(stripped):
        return int(stripped)
    if _FLOAT_RE.match(stripped):
        return float(stripped)
    percent = _PERCENT_RE.match(stripped)
    if percent:
        return float(percent.group(1)) / 100
    upper = stripped.upper()
    if upper == "TRUE":
        return True
    if upper == "FALSE":
        return False
    return text


def _read_csv(buffer: bytes) -> List[Tuple[str, Grid]]:
    text = buffer.decode("utf-8-sig")
    reader = csv.reader(io.StringIO(text, newline=""))
    return [(CSV_SHEET_NAME, _trim_rows(reader, coerce_csv_value))]


def read_workbook(buffer: bytes) -> List[Tuple[str, Grid]]:
    """
    Decodes a workbook buffer into `(sheet_name, grid)` pairs in sheet order.

    Args:
        buffer: Raw bytes of an .xlsx/.xlsm workbook or of a CSV file.

    Returns:
        List of `(sheet_name, grid)` tuples, in workbook order.

    Raises:
        ParseError: If the buffer is empty or cannot be decoded. The original
            exception is kept in `ParseError.cause`.
    """
    if not buffer:
        raise ParseError("Failed to read file: the buffer is empty")

    try:
        if bytes(buffer[:4]) == ZIP_SIGNATURE:
            sheets = _read_xlsx(bytes(buffer))
        else:
            sheets = _read_csv(bytes(buffer))
    except Exception as exc:
        log.error(f"Workbook decoding failed: {exc}")
        raise ParseError(f"Failed to read file: {exc}", cause=exc) from exc

    log.debug(f"Decoded {len(sheets)} sheet(s): {[name for name, _ in sheets]}")
    return sheets
