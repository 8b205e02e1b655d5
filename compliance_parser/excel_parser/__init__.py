# compliance_parser/excel_parser/__init__.py
"""
Excel Parser Module

This module turns the sheets of a land-survey compliance checklist workbook
into district and village records. It contains specialized functions for:

- Decoding workbook buffers into cell grids
- Cell value normalization
- Compliance item and village metadata extraction
- Village and district assembly
- Workflow stage classification
"""

from .build_district import build_district, find_village_name_row, should_exclude_sheet
from .build_village import build_village, read_village_name
from .get_compliance_items import get_compliance_items
from .normalize_value import CellKind, classify_cell, normalize_value
from .read_village_metadata import excel_serial_to_iso, read_village_metadata
from .read_workbook import Grid, get_cell, read_workbook
from .stage_patterns import is_13_published_stage, is_92_published_stage, is_above_90_stage

__all__ = [
    # Decoding
    "read_workbook",
    "get_cell",
    "Grid",
    # Assembly
    "build_district",
    "build_village",
    "find_village_name_row",
    "should_exclude_sheet",
    "read_village_name",
    # Extraction
    "get_compliance_items",
    "read_village_metadata",
    "excel_serial_to_iso",
    # Normalization
    "normalize_value",
    "classify_cell",
    "CellKind",
    # Stages
    "is_92_published_stage",
    "is_13_published_stage",
    "is_above_90_stage",
]
