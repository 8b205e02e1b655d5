# compliance_parser/excel_parser/build_district.py

"""
Assembly of one district from one sheet.

Purpose:
    A district sheet lays villages out as columns. This module finds the row
    with the village names, builds a Village for every data column and
    aggregates them into a District.

Logic:
    1.  Sheets whose trimmed, lower-cased name is in the exclusion list
        (guidelines, templates, test sheets) are skipped.
    2.  The village-name row is the first row whose identifier column holds
        exactly "Village". Row offsets drift between revisions of the
        workbook, so the fixed fallback row is used only when the scan finds
        nothing.
    3.  Every column from the data-start column to the end of that row is
        handed to `build_village`; non-village columns are dropped.
    4.  A sheet without villages yields no district.
    5.  District averages are plain means of the village percents: every
        village weighs the same regardless of its item count.
"""

import logging
from typing import List, Optional, Sequence

from ..config import LayoutConfig, ParserConfig, config as default_config
from ..models import District, Village
from .build_village import build_village, mean
from .read_workbook import Grid, get_cell

log = logging.getLogger(__name__)


def should_exclude_sheet(sheet_name: str, excluded_sheets: Sequence[str]) -> bool:
    """True if the sheet name matches an excluded name (case and surrounding spaces ignored)."""
    name = sheet_name.strip().lower()
    return any(name == excluded.strip().lower() for excluded in excluded_sheets)


def find_village_name_row(grid: Grid, layout: LayoutConfig) -> int:
    """
    Finds the row holding the village names.

    Returns the first row whose identifier column equals the identifier text
    exactly, or the configured fallback row.
    """
    for row_index in range(len(grid)):
        if get_cell(grid, row_index, layout.identifier_column) == layout.village_identifier:
            return row_index

    log.debug(
        f"'{layout.village_identifier}' not found in column {layout.identifier_column}, "
        f"falling back to row {layout.village_name_row}"
    )
    return layout.village_name_row


def build_district(grid: Grid, sheet_name: str, config: Optional[ParserConfig] = None) -> Optional[District]:
    """
    Builds the District of one sheet.

    Args:
        grid: Sheet cells.
        sheet_name: Sheet name, used as the district name.
        config: Parser configuration; the global one by default.

    Returns:
        The District, or None for excluded sheets and sheets without villages.
    """
    config = config or default_config
    layout = config.layout

    if should_exclude_sheet(sheet_name, config.sheets.excluded_sheets):
        log.debug(f"Sheet '{sheet_name}' is excluded")
        return None

    name_row = find_village_name_row(grid, layout)
    row_length = len(grid[name_row]) if 0 <= name_row < len(grid) and grid[name_row] else 0

    villages: List[Village] = []
    for column in range(layout.data_start_column, row_length):
        village = build_village(grid, column, sheet_name, name_row, config)
        if village is not None:
            villages.append(village)

    if not villages:
        log.debug(f"Sheet '{sheet_name}' has no villages")
        return None

    log.info(f"District '{sheet_name}': {len(villages)} village(s)")
    return District(
        name=sheet_name,
        villages=tuple(villages),
        avg_92_percent=mean([village.sec92_percent for village in villages]),
        avg_13_percent=mean([village.sec13_percent for village in villages]),
    )
