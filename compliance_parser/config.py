"""
Configuration module for the compliance workbook parser.

Holds the settings of every parser component:
- Workbook layout (row and column offsets of the checklist grid)
- Sheet selection rules
- Compliance thresholds
- Cell value normalization tokens
- Logging

Layout offsets are configuration rather than code so that a revision of the
source spreadsheet only needs new values here (or in the environment).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from .constants import DEFAULT_ITEM_NAME, DEFAULT_PERSONNEL, DEFAULT_STAGE, PARSE_VILLAGE_IDENTIFIER
from .exceptions import ConfigurationError

# Load environment variables
load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def _env_list(name: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass
class LayoutConfig:
    """Physical positions of the checklist data (0-based grid indices)."""

    # Village-name row: scanned for first, fallback row used otherwise
    village_identifier: str = PARSE_VILLAGE_IDENTIFIER
    identifier_column: int = 2
    village_name_row: int = field(default_factory=lambda: _env_int("COMPLIANCE_VILLAGE_FALLBACK_ROW", 55))

    label_column: int = 2
    data_start_column: int = 3

    # Workflow and personnel rows
    stage_row: int = 1
    published_date_row: int = 2
    days_passed_row: int = 3
    assistant_director_row: int = 5
    superintendent_row: int = 6
    head_surveyor_row: int = 7
    government_surveyor_row: int = 8

    # Inclusive item ranges per section
    sec92_start_row: int = 61
    sec92_end_row: int = 73
    sec13_start_row: int = 77
    sec13_end_row: int = 89

    def validate(self) -> None:
        for name, value in vars(self).items():
            if isinstance(value, int) and value < 0:
                raise ConfigurationError(f"Layout offset '{name}' must be non-negative, got {value}")
        if self.sec92_start_row > self.sec92_end_row:
            raise ConfigurationError("Section 9(2) start row is after its end row")
        if self.sec13_start_row > self.sec13_end_row:
            raise ConfigurationError("Section 13 start row is after its end row")


@dataclass
class SheetConfig:
    """Which sheets of the workbook are parsed."""

    # Sheets before this index hold guidelines and are never parsed
    first_sheet_index: int = 1
    excluded_sheets: Tuple[str, ...] = field(
        default_factory=lambda: _env_list(
            "COMPLIANCE_EXCLUDED_SHEETS",
            (
                "test",
                "sheet 17",
                "sheet 128",
                "sheet17",
                "sheet128",
                "guideline",
                "guidelines",
                "instructions",
                "template",
            ),
        )
    )


@dataclass
class ThresholdConfig:
    """Business thresholds."""

    completed: float = field(default_factory=lambda: _env_float("COMPLIANCE_COMPLETED_THRESHOLD", 0.9))
    high: float = 0.75
    medium: float = 0.5
    critical_days: int = field(default_factory=lambda: _env_int("COMPLIANCE_CRITICAL_DAYS", 90))

    def validate(self) -> None:
        for name in ("completed", "high", "medium"):
            value = getattr(self, name)
            if not 0 <= value <= 1:
                raise ConfigurationError(f"Threshold '{name}' must be within [0, 1], got {value}")
        if self.critical_days < 0:
            raise ConfigurationError(f"critical_days must be non-negative, got {self.critical_days}")


@dataclass
class NormalizationConfig:
    """Tokens used to normalize free-text cells."""

    completed_values: Tuple[str, ...] = ("yes", "completed", "ready", "done", "finish", "finished")
    invalid_village_names: Tuple[str, ...] = ("#REF!", "#N/A", "#VALUE!", "#DIV/0!", "undefined", "null")
    default_personnel: str = DEFAULT_PERSONNEL
    default_stage: str = DEFAULT_STAGE
    default_item_name: str = DEFAULT_ITEM_NAME


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file_path: Optional[Path] = None
    max_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5

    def __post_init__(self):
        if self.file_path is None:
            self.file_path = Path(os.getenv("LOG_DIR", "logs")) / "compliance_parser.log"


@dataclass
class ParserConfig:
    """Top-level parser configuration."""

    allowed_extensions: tuple = (".xlsx", ".xlsm", ".csv")
    max_file_size: int = 10 * 1024 * 1024  # 10MB

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    sheets: SheetConfig = field(default_factory=SheetConfig)
    thresholds: ThresholdConfig = field(default_factory=ThresholdConfig)
    normalization: NormalizationConfig = field(default_factory=NormalizationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> bool:
        """
        Validates the configuration.

        Returns:
            True if the configuration is valid

        Raises:
            ConfigurationError: on the first invalid value
        """
        self.layout.validate()
        self.thresholds.validate()
        if self.sheets.first_sheet_index < 0:
            raise ConfigurationError("first_sheet_index must be non-negative")
        if self.max_file_size <= 0:
            raise ConfigurationError("max_file_size must be positive")
        return True


# Global configuration instance
config = ParserConfig()


def get_layout_config() -> LayoutConfig:
    """Returns the workbook layout configuration."""
    return config.layout


def get_normalization_config() -> NormalizationConfig:
    """Returns the cell value normalization tokens."""
    return config.normalization


def get_threshold_config() -> ThresholdConfig:
    """Returns the compliance thresholds."""
    return config.thresholds


def get_logging_config() -> LoggingConfig:
    """Returns the logging configuration."""
    return config.logging
