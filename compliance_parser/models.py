"""
Domain model produced by the workbook parser.

    District (one sheet)
      └── Village (one data column)
            └── ComplianceItem (one checklist row, per section)

All records are frozen and hold tuples, so the parsed district list can be
shared with readers without copying. A refresh replaces the whole list.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .constants import (
    JSON_KEY_ASSISTANT_DIRECTOR,
    JSON_KEY_AVG_13_PERCENT,
    JSON_KEY_AVG_92_PERCENT,
    JSON_KEY_DAYS_PASSED_AFTER_92,
    JSON_KEY_DISTRICT,
    JSON_KEY_GOVERNMENT_SURVEYOR,
    JSON_KEY_HEAD_SURVEYOR,
    JSON_KEY_ID,
    JSON_KEY_IS_CRITICAL,
    JSON_KEY_NAME,
    JSON_KEY_OVERALL_PERCENT,
    JSON_KEY_OVERALL_STATUS,
    JSON_KEY_PUBLISHED_DATE,
    JSON_KEY_RAW,
    JSON_KEY_SEC13_COMPLETED_COUNT,
    JSON_KEY_SEC13_ITEMS,
    JSON_KEY_SEC13_PERCENT,
    JSON_KEY_SEC13_STATUS,
    JSON_KEY_SEC13_TOTAL_COUNT,
    JSON_KEY_SEC92_COMPLETED_COUNT,
    JSON_KEY_SEC92_ITEMS,
    JSON_KEY_SEC92_PERCENT,
    JSON_KEY_SEC92_STATUS,
    JSON_KEY_SEC92_TOTAL_COUNT,
    JSON_KEY_STAGE,
    JSON_KEY_STATUS,
    JSON_KEY_SUPERINTENDENT,
    JSON_KEY_TOTAL_VILLAGES,
    JSON_KEY_VALUE,
    JSON_KEY_VILLAGES,
    SECTION_13,
    SECTION_92,
)

Number = Union[int, float]


@dataclass(frozen=True)
class ComplianceItem:
    """One checklist entry of one village under one section."""

    id: str
    name: str
    value: float
    status: str
    raw: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            JSON_KEY_ID: self.id,
            JSON_KEY_NAME: self.name,
            JSON_KEY_VALUE: self.value,
            JSON_KEY_STATUS: self.status,
            JSON_KEY_RAW: self.raw,
        }


@dataclass(frozen=True)
class SectionStats:
    """Items of one section together with their aggregates."""

    items: Tuple[ComplianceItem, ...]
    completed_count: int
    total_count: int
    percent: float
    status: str


@dataclass(frozen=True)
class VillageMetadata:
    """Non-checklist attributes of a village column."""

    stage: str
    published_date: Optional[str]
    days_passed_after_92: Optional[Number]
    is_critical: bool
    head_surveyor: str
    government_surveyor: str
    assistant_director: str
    superintendent: str


@dataclass(frozen=True)
class Village:
    """One data column of a district sheet."""

    id: str
    name: str
    district: str
    metadata: VillageMetadata
    sec92: SectionStats
    sec13: SectionStats
    overall_percent: float
    overall_status: str

    # Flat accessors mirroring the serialized payload

    @property
    def stage(self) -> str:
        return self.metadata.stage

    @property
    def published_date(self) -> Optional[str]:
        return self.metadata.published_date

    @property
    def days_passed_after_92(self) -> Optional[Number]:
        return self.metadata.days_passed_after_92

    @property
    def is_critical(self) -> bool:
        return self.metadata.is_critical

    @property
    def head_surveyor(self) -> str:
        return self.metadata.head_surveyor

    @property
    def government_surveyor(self) -> str:
        return self.metadata.government_surveyor

    @property
    def assistant_director(self) -> str:
        return self.metadata.assistant_director

    @property
    def superintendent(self) -> str:
        return self.metadata.superintendent

    @property
    def sec92_items(self) -> Tuple[ComplianceItem, ...]:
        return self.sec92.items

    @property
    def sec92_completed_count(self) -> int:
        return self.sec92.completed_count

    @property
    def sec92_total_count(self) -> int:
        return self.sec92.total_count

    @property
    def sec92_percent(self) -> float:
        return self.sec92.percent

    @property
    def sec92_status(self) -> str:
        return self.sec92.status

    @property
    def sec13_items(self) -> Tuple[ComplianceItem, ...]:
        return self.sec13.items

    @property
    def sec13_completed_count(self) -> int:
        return self.sec13.completed_count

    @property
    def sec13_total_count(self) -> int:
        return self.sec13.total_count

    @property
    def sec13_percent(self) -> float:
        return self.sec13.percent

    @property
    def sec13_status(self) -> str:
        return self.sec13.status

    def section(self, name: str) -> SectionStats:
        """Returns the stats of section "9(2)" or "13"."""
        if name == SECTION_92:
            return self.sec92
        if name == SECTION_13:
            return self.sec13
        raise ValueError(f"Unknown section: {name!r}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            JSON_KEY_ID: self.id,
            JSON_KEY_NAME: self.name,
            JSON_KEY_DISTRICT: self.district,
            JSON_KEY_HEAD_SURVEYOR: self.head_surveyor,
            JSON_KEY_GOVERNMENT_SURVEYOR: self.government_surveyor,
            JSON_KEY_ASSISTANT_DIRECTOR: self.assistant_director,
            JSON_KEY_SUPERINTENDENT: self.superintendent,
            JSON_KEY_STAGE: self.stage,
            JSON_KEY_PUBLISHED_DATE: self.published_date,
            JSON_KEY_DAYS_PASSED_AFTER_92: self.days_passed_after_92,
            JSON_KEY_IS_CRITICAL: self.is_critical,
            JSON_KEY_SEC92_ITEMS: [item.to_dict() for item in self.sec92_items],
            JSON_KEY_SEC92_COMPLETED_COUNT: self.sec92_completed_count,
            JSON_KEY_SEC92_TOTAL_COUNT: self.sec92_total_count,
            JSON_KEY_SEC92_PERCENT: self.sec92_percent,
            JSON_KEY_SEC92_STATUS: self.sec92_status,
            JSON_KEY_SEC13_ITEMS: [item.to_dict() for item in self.sec13_items],
            JSON_KEY_SEC13_COMPLETED_COUNT: self.sec13_completed_count,
            JSON_KEY_SEC13_TOTAL_COUNT: self.sec13_total_count,
            JSON_KEY_SEC13_PERCENT: self.sec13_percent,
            JSON_KEY_SEC13_STATUS: self.sec13_status,
            JSON_KEY_OVERALL_PERCENT: self.overall_percent,
            JSON_KEY_OVERALL_STATUS: self.overall_status,
        }


@dataclass(frozen=True)
class District:
    """One parsed sheet. Never empty."""

    name: str
    villages: Tuple[Village, ...]
    avg_92_percent: float
    avg_13_percent: float

    @property
    def total_villages(self) -> int:
        return len(self.villages)

    def to_dict(self) -> Dict[str, Any]:
        return {
            JSON_KEY_NAME: self.name,
            JSON_KEY_VILLAGES: [village.to_dict() for village in self.villages],
            JSON_KEY_TOTAL_VILLAGES: self.total_villages,
            JSON_KEY_AVG_92_PERCENT: self.avg_92_percent,
            JSON_KEY_AVG_13_PERCENT: self.avg_13_percent,
        }
