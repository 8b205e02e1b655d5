# compliance_parser/tests/conftest.py
"""
pytest configuration.
Shared fixtures and paths for all tests.
"""

import io
import sys
from pathlib import Path

import pytest
from openpyxl import Workbook

# Add the project root to the Python path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from compliance_parser.config import LayoutConfig, ParserConfig  # noqa: E402
from compliance_parser.tests.grid_helpers import fill_village, grid_to_sheet, put  # noqa: E402


@pytest.fixture
def layout() -> LayoutConfig:
    return LayoutConfig(village_name_row=55)


@pytest.fixture
def parser_config(layout) -> ParserConfig:
    cfg = ParserConfig(layout=layout)
    cfg.thresholds.completed = 0.9
    cfg.thresholds.critical_days = 90
    return cfg


@pytest.fixture
def village_grid(layout):
    """Factory building a grid with a "Village" anchor and the given village columns."""

    def factory(*villages):
        grid = []
        put(grid, layout.village_name_row, layout.identifier_column, layout.village_identifier)
        for offset, village in enumerate(villages):
            fill_village(grid, layout, layout.data_start_column + offset, **village)
        return grid

    return factory


@pytest.fixture
def workbook_bytes():
    """Factory: list of (sheet_name, grid) -> .xlsx bytes, in sheet order."""

    def factory(sheets):
        wb = Workbook()
        wb.remove(wb.active)
        for sheet_name, grid in sheets:
            grid_to_sheet(wb.create_sheet(title=sheet_name), grid)
        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    return factory
