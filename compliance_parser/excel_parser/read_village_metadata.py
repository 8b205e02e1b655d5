# compliance_parser/excel_parser/read_village_metadata.py

"""
Extraction of the non-checklist attributes of a village column.

Purpose:
    Above the checklist, each village column carries its workflow stage, the
    9(2) publication date, the sheet's own "days passed after 9(2)" counter
    and the names of four responsible officials. This module reads them into
    a `VillageMetadata` record.

Logic:
    1.  The stage is the trimmed text of the stage row ("Unknown" if blank).
    2.  The publication date and the day counter are read **only** when the
        stage says the village is 9(2)-published (both "9(2)" and
        "published" appear). Stale values left in those cells for other
        stages are ignored.
    3.  The date cell is a spreadsheet serial number (day 0 = 1899-12-30)
        and becomes an ISO "YYYY-MM-DD" string. The day counter is taken as
        is; it is never recomputed from the date.
    4.  A village is critical when its day counter reaches the configured
        number of days.
    5.  Personnel cells are trimmed text, "Not Assigned" when blank or not
        text.
"""

import datetime
import logging
import math
from typing import Any, Optional

from ..config import (
    LayoutConfig,
    NormalizationConfig,
    get_layout_config,
    get_normalization_config,
    get_threshold_config,
)
from ..constants import EXCEL_EPOCH_DAY, EXCEL_EPOCH_MONTH, EXCEL_EPOCH_YEAR
from ..models import VillageMetadata
from .normalize_value import is_finite_number
from .read_workbook import Grid, get_cell
from .stage_patterns import is_92_published_stage

log = logging.getLogger(__name__)

EXCEL_EPOCH = datetime.date(EXCEL_EPOCH_YEAR, EXCEL_EPOCH_MONTH, EXCEL_EPOCH_DAY)


def excel_serial_to_iso(serial: float) -> Optional[str]:
    """
    Converts a spreadsheet serial day number to an ISO date string.

    Any time-of-day fraction is dropped. Returns None for serials outside
    the representable date range.
    """
    try:
        date = EXCEL_EPOCH + datetime.timedelta(days=math.floor(serial))
    except (OverflowError, ValueError):
        log.debug(f"Serial date {serial!r} is out of range")
        return None
    return date.isoformat()


def read_text(grid: Grid, row: int, column: int, default: str) -> str:
    """Returns the trimmed text at (row, column), or `default` if blank or not text."""
    value = get_cell(grid, row, column)
    if not isinstance(value, str):
        return default
    value = value.strip()
    return value or default


def _read_number(grid: Grid, row: int, column: int) -> Optional[Any]:
    value = get_cell(grid, row, column)
    return value if is_finite_number(value) else None


def read_village_metadata(
    grid: Grid,
    column: int,
    layout: Optional[LayoutConfig] = None,
    critical_days: Optional[int] = None,
    normalization: Optional[NormalizationConfig] = None,
) -> VillageMetadata:
    """
    Reads the workflow and personnel attributes of one data column.

    Args:
        grid: Sheet cells.
        column: Data column of the village.
        layout: Row positions of the attributes.
        critical_days: Day counter value from which a village is critical.
        normalization: Defaults for blank stage and personnel cells.

    Returns:
        VillageMetadata for the column.
    """
    if layout is None:
        layout = get_layout_config()
    if critical_days is None:
        critical_days = get_threshold_config().critical_days
    if normalization is None:
        normalization = get_normalization_config()

    stage = read_text(grid, layout.stage_row, column, normalization.default_stage)

    published_date: Optional[str] = None
    days_passed: Optional[Any] = None
    if is_92_published_stage(stage):
        serial = _read_number(grid, layout.published_date_row, column)
        if serial is not None:
            published_date = excel_serial_to_iso(serial)
        days_passed = _read_number(grid, layout.days_passed_row, column)

    is_critical = days_passed is not None and days_passed >= critical_days

    personnel = normalization.default_personnel
    return VillageMetadata(
        stage=stage,
        published_date=published_date,
        days_passed_after_92=days_passed,
        is_critical=is_critical,
        head_surveyor=read_text(grid, layout.head_surveyor_row, column, personnel),
        government_surveyor=read_text(grid, layout.government_surveyor_row, column, personnel),
        assistant_director=read_text(grid, layout.assistant_director_row, column, personnel),
        superintendent=read_text(grid, layout.superintendent_row, column, personnel),
    )
