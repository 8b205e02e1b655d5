"""
Custom exceptions for the compliance workbook parser.

The module defines the error types raised while turning a compliance
checklist workbook into the district/village model.
"""


class ComplianceParsingError(Exception):
    """Base exception for compliance workbook parsing errors."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message)
        self.file_path = file_path


class ParseError(ComplianceParsingError):
    """Raised when the input buffer cannot be decoded as a workbook."""

    def __init__(self, message: str, cause: Exception = None, file_path: str = None):
        super().__init__(message, file_path)
        self.cause = cause


class SourceFetchError(ComplianceParsingError):
    """Raised when a remote workbook cannot be downloaded."""

    def __init__(self, message: str, status_code: int = None, file_path: str = None):
        super().__init__(message, file_path)
        self.status_code = status_code


class ConfigurationError(Exception):
    """Raised for invalid application configuration."""

    pass
