# compliance_parser/excel_parser/stage_patterns.py

"""Classification of the free-text workflow stage of a village."""

from typing import Iterable, Optional

from ..constants import PARSE_STAGE_13_PUBLISHED, PARSE_STAGE_92_PUBLISHED, PARSE_STAGE_ABOVE_90


def _contains_all(stage: str, patterns: Iterable[str]) -> bool:
    return all(pattern.lower() in stage for pattern in patterns)


def _contains_any(stage: str, patterns: Iterable[str]) -> bool:
    return any(pattern.lower() in stage for pattern in patterns)


def is_92_published_stage(stage: Optional[str]) -> bool:
    """True if the stage mentions both "9(2)" and "published" (any case)."""
    if not stage:
        return False
    return _contains_all(stage.lower(), PARSE_STAGE_92_PUBLISHED)


def is_13_published_stage(stage: Optional[str]) -> bool:
    """True if the stage mentions "13 published" (any case)."""
    if not stage:
        return False
    return _contains_any(stage.lower(), PARSE_STAGE_13_PUBLISHED)


def is_above_90_stage(stage: Optional[str]) -> bool:
    """True for villages past 90% field survey but not yet published."""
    if not stage:
        return False
    return _contains_any(stage.lower().strip(), PARSE_STAGE_ABOVE_90)
