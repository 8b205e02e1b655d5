"""Land-survey compliance checklist parser."""

from .exceptions import ComplianceParsingError, ConfigurationError, ParseError, SourceFetchError
from .models import ComplianceItem, District, Village
from .parse import parse, parse_file

__all__ = [
    "parse",
    "parse_file",
    "District",
    "Village",
    "ComplianceItem",
    "ParseError",
    "ComplianceParsingError",
    "ConfigurationError",
    "SourceFetchError",
]
