# compliance_parser/excel_parser/get_compliance_items.py

"""
Extraction of the checklist items of one village for one section.

Each section ("9(2)", "13") occupies a fixed, inclusive range of rows. The
item label sits in the label column, the village's value in the village's
data column. Items keep the row order of the sheet.

Rows that do not exist in the sheet (the sheet ends before the range does)
produce no item at all, so a short sheet yields a shorter item list instead
of zero-valued placeholders.
"""

import logging
from typing import Any, List, Optional

from ..config import NormalizationConfig, get_layout_config, get_normalization_config
from ..models import ComplianceItem
from .normalize_value import normalize_value
from .read_workbook import Grid, get_cell, has_row

log = logging.getLogger(__name__)


def _item_name(label: Any, default_name: str) -> str:
    if label is None or label == "":
        return default_name
    return str(label)


def get_compliance_items(
    grid: Grid,
    column: int,
    start_row: int,
    end_row: int,
    prefix: str,
    label_column: Optional[int] = None,
    completed_threshold: Optional[float] = None,
    normalization: Optional[NormalizationConfig] = None,
) -> List[ComplianceItem]:
    """
    Builds the compliance items of one data column for an inclusive row range.

    Args:
        grid: Sheet cells.
        column: Data column of the village.
        start_row: First item row (inclusive).
        end_row: Last item row (inclusive).
        prefix: Section prefix used in item ids ("9(2)" or "13").
        label_column: Column holding the item labels.
        completed_threshold: Threshold passed to the normalizer.
        normalization: Token configuration for labels and text values.

    Returns:
        List[ComplianceItem]: one item per existing row, ids "{prefix}-{row}".
    """
    if label_column is None:
        label_column = get_layout_config().label_column
    if normalization is None:
        normalization = get_normalization_config()

    items: List[ComplianceItem] = []
    for row in range(start_row, end_row + 1):
        if not has_row(grid, row):
            log.debug(f"get_compliance_items: row {row} is absent, section '{prefix}' item skipped")
            continue

        raw = get_cell(grid, row, column)
        value, status = normalize_value(raw, completed_threshold, normalization.completed_values)
        items.append(
            ComplianceItem(
                id=f"{prefix}-{row}",
                name=_item_name(get_cell(grid, row, label_column), normalization.default_item_name),
                value=value,
                status=status,
                raw=raw,
            )
        )

    return items
