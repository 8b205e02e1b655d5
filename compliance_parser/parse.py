"""
Entry point of the compliance workbook parser.

Purpose:
    Turns a checklist workbook (one sheet per district, one column per
    village) into the ordered list of `District` records the dashboard
    displays.

Sequence:
1.  The buffer is decoded into sheet grids. A buffer that is not a workbook
    aborts the whole parse with a single `ParseError`; nothing partial is
    returned.

2.  Sheets before `first_sheet_index` (the guideline sheet at index 0) are
    skipped.

3.  Each remaining sheet, in workbook order, is handed to `build_district`.
    Excluded sheets and sheets without villages simply produce nothing.

4.  The districts are returned in sheet order. An empty list is a valid
    result and looks the same as "no file loaded" to the dashboard.

The parse is a pure function of its input: the same bytes always give the
same districts, and the result is never updated in place.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import ParserConfig, config as default_config
from .constants import SECTION_13, SECTION_92
from .excel_parser.build_district import build_district
from .excel_parser.read_workbook import read_workbook
from .exceptions import ComplianceParsingError, ConfigurationError
from .models import District
from .summary import build_dashboard_summary, list_critical_villages

# Run as `python -m`, the module is "__main__"; keep it under the package logger.
log = logging.getLogger("compliance_parser.parse" if __name__ == "__main__" else __name__)


def parse(buffer: bytes, config: Optional[ParserConfig] = None) -> List[District]:
    """
    Parses a workbook buffer into districts.

    Args:
        buffer: Bytes of an .xlsx workbook or a CSV file.
        config: Parser configuration; the global one by default.

    Returns:
        List[District]: districts in sheet order, possibly empty.

    Raises:
        ParseError: If the buffer cannot be decoded as a workbook.
    """
    config = config or default_config
    sheets = read_workbook(buffer)

    districts: List[District] = []
    for index, (sheet_name, grid) in enumerate(sheets):
        if index < config.sheets.first_sheet_index:
            log.debug(f"Sheet '{sheet_name}' (index {index}) is a guideline sheet, skipped")
            continue
        district = build_district(grid, sheet_name, config)
        if district is not None:
            districts.append(district)

    log.info(f"Parsed {len(districts)} district(s) from {len(sheets)} sheet(s)")
    return districts


def parse_file(path: str, config: Optional[ParserConfig] = None) -> List[District]:
    """Reads a local workbook and parses it."""
    source_path = Path(path)
    log.info(f"--- Parsing file: {source_path} ---")
    try:
        return parse(source_path.read_bytes(), config)
    except ComplianceParsingError as exc:
        exc.file_path = str(source_path)
        raise


def to_payload(districts: Sequence[District]) -> List[Dict[str, Any]]:
    """JSON-ready representation of the parsed districts."""
    return [district.to_dict() for district in districts]


def _summary_payload(districts: Sequence[District]) -> Dict[str, Any]:
    return {
        "sections": [build_dashboard_summary(districts, section).to_dict() for section in (SECTION_92, SECTION_13)],
        "critical": [
            {
                "name": village.name,
                "district": village.district,
                "headSurveyor": village.head_surveyor,
                "daysPassedAfter92": village.days_passed_after_92,
                "publishedDate": village.published_date,
            }
            for village in list_critical_villages(districts)
        ],
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Imported here so that using the library never attaches handlers
    from .logger import configure_third_party_loggers, setup_logging
    from .sources import load_source

    cli_parser = argparse.ArgumentParser(
        description="Parses a land-survey compliance checklist workbook into districts and villages.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    cli_parser.add_argument("source", type=str, help="Path to an .xlsx/.csv file or a Google Sheets URL.")
    cli_parser.add_argument("-o", "--output", type=str, help="Write the JSON here instead of stdout.")
    cli_parser.add_argument("--summary", action="store_true", help="Print dashboard figures instead of records.")
    cli_parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING or ERROR.")
    args = cli_parser.parse_args(argv)

    setup_logging(level=args.log_level, log_to_file=False)
    configure_third_party_loggers()

    try:
        default_config.validate()
        districts = parse(load_source(args.source))
    except (ComplianceParsingError, ConfigurationError):
        log.exception(f"Failed to read file '{args.source}'.")
        return 1

    payload = _summary_payload(districts) if args.summary else to_payload(districts)
    text = json.dumps(payload, ensure_ascii=False, indent=2)

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        log.info(f"JSON saved to: {args.output}")
    else:
        sys.stdout.write(text + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
