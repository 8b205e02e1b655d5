# compliance_parser/excel_parser/build_village.py

"""
Assembly of one village record from one data column of a district sheet.

Logic:
    1.  The village name is read at (village-name row, column). Columns whose
        name is blank, not text, or an error/invalid marker ("#REF!", ...)
        are not villages and yield None.
    2.  Checklist items are extracted for the 9(2) and the 13 row ranges.
    3.  Metadata (stage, dates, personnel) is extracted.
    4.  Per section:
        - completed_count: items with status Completed;
        - percent: mean of the item values (partial credit counts), 0.0 for
          a section with no rows in the sheet;
        - status: Completed only when the stage says "13 published".
          The status follows the workflow stage, not the item values: a
          village at 100% is still Pending until section 13 is published.
    5.  overall_percent is the mean of both section percents;
        overall_status follows the same stage rule.
"""

import logging
from typing import Any, Optional, Sequence

from ..config import ParserConfig, config as default_config
from ..constants import SECTION_13, SECTION_92, STATUS_COMPLETED, STATUS_PENDING
from ..models import ComplianceItem, SectionStats, Village
from .get_compliance_items import get_compliance_items
from .read_village_metadata import read_village_metadata
from .read_workbook import Grid, get_cell
from .stage_patterns import is_13_published_stage

log = logging.getLogger(__name__)


def read_village_name(grid: Grid, row: int, column: int, invalid_names: Sequence[str]) -> Optional[str]:
    """Returns the village name at (row, column), or None if the column is not a village."""
    value: Any = get_cell(grid, row, column)
    if not isinstance(value, str):
        return None
    name = value.strip()
    if not name or name in invalid_names:
        return None
    return name


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def section_stats(items: Sequence[ComplianceItem], status: str) -> SectionStats:
    return SectionStats(
        items=tuple(items),
        completed_count=sum(1 for item in items if item.status == STATUS_COMPLETED),
        total_count=len(items),
        percent=mean([item.value for item in items]),
        status=status,
    )


def build_village(
    grid: Grid,
    column: int,
    district_name: str,
    village_name_row: int,
    config: Optional[ParserConfig] = None,
) -> Optional[Village]:
    """
    Builds the Village of one data column.

    Args:
        grid: Sheet cells.
        column: Data column index.
        district_name: Name of the sheet owning the column.
        village_name_row: Resolved row index of the village names.
        config: Parser configuration; the global one by default.

    Returns:
        The Village, or None if the column does not hold a village.
    """
    config = config or default_config
    layout = config.layout
    normalization = config.normalization

    name = read_village_name(grid, village_name_row, column, normalization.invalid_village_names)
    if name is None:
        return None

    def items_for(start_row: int, end_row: int, prefix: str):
        return get_compliance_items(
            grid,
            column,
            start_row,
            end_row,
            prefix,
            label_column=layout.label_column,
            completed_threshold=config.thresholds.completed,
            normalization=normalization,
        )

    sec92_items = items_for(layout.sec92_start_row, layout.sec92_end_row, SECTION_92)
    sec13_items = items_for(layout.sec13_start_row, layout.sec13_end_row, SECTION_13)

    metadata = read_village_metadata(
        grid,
        column,
        layout=layout,
        critical_days=config.thresholds.critical_days,
        normalization=normalization,
    )

    status = STATUS_COMPLETED if is_13_published_stage(metadata.stage) else STATUS_PENDING
    sec92 = section_stats(sec92_items, status)
    sec13 = section_stats(sec13_items, status)

    log.debug(
        f"build_village: '{name}' (column {column}) stage='{metadata.stage}', "
        f"9(2)={sec92.percent:.2f}, 13={sec13.percent:.2f}"
    )

    return Village(
        id=f"{name}-{column}",
        name=name,
        district=district_name,
        metadata=metadata,
        sec92=sec92,
        sec13=sec13,
        overall_percent=(sec92.percent + sec13.percent) / 2,
        overall_status=status,
    )
