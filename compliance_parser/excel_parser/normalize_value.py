# compliance_parser/excel_parser/normalize_value.py

"""
Normalization of a raw checklist cell into a compliance measurement.

Checklist cells hold fractions (0.19, 1), operator free text ("Yes",
"Ready", "not ready"), error markers ("#REF!"), booleans or nothing at all.
`normalize_value` maps every one of them to a value in [0, 1] and a binary
status, and never raises.

The raw value is first classified into a `CellKind` and each kind has its
own rule:

- NUMBER: finite int/float (bool excluded). Clamped to [0, 1];
  Completed when the clamped value reaches the completion threshold.
- TEXT: trimmed and lower-cased, then matched exactly against the
  affirmative tokens. A match is (1, Completed), anything else (0, Pending).
  Substrings do not count: "not ready" is Pending.
- OTHER: None, booleans, NaN/inf and any other object give (0, Pending).
"""

import enum
import math
from typing import Any, Iterable, Optional, Tuple

from ..config import get_normalization_config, get_threshold_config
from ..constants import STATUS_COMPLETED, STATUS_PENDING


class CellKind(enum.Enum):
    NUMBER = "number"
    TEXT = "text"
    OTHER = "other"


def classify_cell(value: Any) -> CellKind:
    """Returns the kind of a raw cell value."""
    if isinstance(value, bool):
        return CellKind.OTHER
    if isinstance(value, int):
        # Python ints are unbounded and may not fit a float
        return CellKind.NUMBER
    if isinstance(value, float) and math.isfinite(value):
        return CellKind.NUMBER
    if isinstance(value, str):
        return CellKind.TEXT
    return CellKind.OTHER


def is_finite_number(value: Any) -> bool:
    return classify_cell(value) is CellKind.NUMBER


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


def _normalize_number(value: float, threshold: float, _tokens) -> Tuple[float, str]:
    clamped = float(clamp(value))
    return clamped, STATUS_COMPLETED if clamped >= threshold else STATUS_PENDING


def _normalize_text(value: str, _threshold, tokens: Iterable[str]) -> Tuple[float, str]:
    if value.strip().lower() in {token.lower() for token in tokens}:
        return 1.0, STATUS_COMPLETED
    return 0.0, STATUS_PENDING


def _normalize_other(_value, _threshold, _tokens) -> Tuple[float, str]:
    return 0.0, STATUS_PENDING


_RULES = {
    CellKind.NUMBER: _normalize_number,
    CellKind.TEXT: _normalize_text,
    CellKind.OTHER: _normalize_other,
}


def normalize_value(
    value: Any,
    completed_threshold: Optional[float] = None,
    completed_values: Optional[Iterable[str]] = None,
) -> Tuple[float, str]:
    """
    Normalizes one raw cell value.

    Args:
        value: Raw cell content of any type.
        completed_threshold: Minimum numeric value counted as Completed.
            Defaults to the configured threshold (0.90).
        completed_values: Affirmative text tokens. Defaults to the
            configured tokens.

    Returns:
        Tuple `(value, status)` where value is within [0, 1] and status is
        "Completed" or "Pending".
    """
    if completed_threshold is None:
        completed_threshold = get_threshold_config().completed
    if completed_values is None:
        completed_values = get_normalization_config().completed_values

    return _RULES[classify_cell(value)](value, completed_threshold, completed_values)
