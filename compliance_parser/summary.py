"""
Dashboard figures derived from a parsed district list.

These helpers only read the parsed records; they are what the dashboard
shows in its KPI cards, its critical-village list and its item cells.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .config import ThresholdConfig, get_threshold_config
from .constants import (
    BAND_COMPLETED,
    BAND_HIGH,
    BAND_LOW,
    BAND_MEDIUM,
    JSON_KEY_AVG_PERCENT,
    JSON_KEY_COMPLETED_VILLAGES,
    JSON_KEY_CRITICAL_VILLAGES,
    JSON_KEY_PENDING_VILLAGES,
    JSON_KEY_SECTION,
    JSON_KEY_TOTAL_DISTRICTS,
    JSON_KEY_TOTAL_VILLAGES,
    SECTION_92,
    STATUS_COMPLETED,
)
from .models import District, Village


@dataclass(frozen=True)
class DashboardSummary:
    section: str
    total_districts: int
    total_villages: int
    avg_percent: float
    completed_villages: int
    pending_villages: int
    critical_villages: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            JSON_KEY_SECTION: self.section,
            JSON_KEY_TOTAL_DISTRICTS: self.total_districts,
            JSON_KEY_TOTAL_VILLAGES: self.total_villages,
            JSON_KEY_AVG_PERCENT: self.avg_percent,
            JSON_KEY_COMPLETED_VILLAGES: self.completed_villages,
            JSON_KEY_PENDING_VILLAGES: self.pending_villages,
            JSON_KEY_CRITICAL_VILLAGES: self.critical_villages,
        }


def select_districts(districts: Sequence[District], district_name: Optional[str] = None) -> List[District]:
    if district_name is None:
        return list(districts)
    return [district for district in districts if district.name == district_name]


def build_dashboard_summary(
    districts: Sequence[District],
    section: str = SECTION_92,
    district_name: Optional[str] = None,
) -> DashboardSummary:
    """
    Computes the KPI figures for one section.

    The average is taken over all villages of the selected districts, so
    unlike `District.avg_92_percent` it weighs districts by village count.

    Args:
        districts: Parsed districts.
        section: "9(2)" or "13".
        district_name: Restrict the figures to one district.
    """
    active = select_districts(districts, district_name)
    villages = [village for district in active for village in district.villages]

    stats = [village.section(section) for village in villages]
    total = len(villages)
    completed = sum(1 for section_stats in stats if section_stats.status == STATUS_COMPLETED)

    return DashboardSummary(
        section=section,
        total_districts=len(active),
        total_villages=total,
        avg_percent=sum(s.percent for s in stats) / total if total else 0.0,
        completed_villages=completed,
        pending_villages=total - completed,
        critical_villages=sum(1 for village in villages if village.is_critical),
    )


def list_critical_villages(districts: Sequence[District]) -> List[Village]:
    """Critical villages of all districts, longest overdue first."""
    critical = [village for district in districts for village in district.villages if village.is_critical]
    # sorted() is stable: ties keep sheet/column order
    return sorted(critical, key=lambda village: village.days_passed_after_92, reverse=True)


def compliance_band(percent: float, thresholds: Optional[ThresholdConfig] = None) -> str:
    """Colour band of a completion percent: completed, high, medium or low."""
    thresholds = thresholds or get_threshold_config()
    if percent >= 1:
        return BAND_COMPLETED
    if percent >= thresholds.high:
        return BAND_HIGH
    if percent >= thresholds.medium:
        return BAND_MEDIUM
    return BAND_LOW


def format_percent(value: float) -> str:
    return f"{math.floor(value * 100 + 0.5)}%"


def format_item_value(value: float, raw: Any = None) -> str:
    """
    Display text of a compliance item.

    The original cell content is shown when present, as a percent when it is
    the same number as the normalized value.
    """
    if raw is None or raw == "":
        return format_percent(value)
    if isinstance(raw, (int, float)) and not isinstance(raw, bool) and abs(raw - value) < 0.001:
        return format_percent(raw)
    return str(raw)
