"""
Acquisition of workbook bytes from a local path or a Google Sheets link.

Google Sheets documents are downloaded through their export endpoint
(`/export?format=xlsx`), which returns the same workbook the upload flow
accepts.
"""

import logging
import re
from pathlib import Path
from typing import Optional

import requests

from .config import config
from .exceptions import SourceFetchError

log = logging.getLogger(__name__)

GOOGLE_SHEET_ID_RE = re.compile(r"/d/([a-zA-Z0-9-_]+)")
GOOGLE_SHEETS_EXPORT_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/export?format={fmt}"
REQUEST_TIMEOUT = 60


def extract_google_sheet_id(url: str) -> Optional[str]:
    """Returns the document id of a Google Sheets URL, or None."""
    match = GOOGLE_SHEET_ID_RE.search(url or "")
    return match.group(1) if match else None


def build_export_url(sheet_id: str, fmt: str = "xlsx") -> str:
    return GOOGLE_SHEETS_EXPORT_URL.format(sheet_id=sheet_id, fmt=fmt)


def fetch_google_sheet(url: str, timeout: int = REQUEST_TIMEOUT) -> bytes:
    """
    Downloads a Google Sheets document as an .xlsx workbook.

    Raises:
        SourceFetchError: If the URL is not a Sheets link or the download fails.
    """
    sheet_id = extract_google_sheet_id(url)
    if not sheet_id:
        raise SourceFetchError(f"Not a Google Sheets URL: {url}")

    export_url = build_export_url(sheet_id)
    log.info(f"Downloading sheet {sheet_id}")
    try:
        response = requests.get(export_url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.HTTPError as exc:
        status_code = exc.response.status_code if exc.response is not None else None
        raise SourceFetchError(f"Failed to fetch sheet {sheet_id}: {exc}", status_code=status_code) from exc
    except requests.exceptions.RequestException as exc:
        raise SourceFetchError(f"Failed to fetch sheet {sheet_id}: {exc}") from exc

    return response.content


def read_local_file(path: str) -> bytes:
    """Reads a local workbook, enforcing the configured extension and size limits."""
    file_path = Path(path)
    if file_path.suffix.lower() not in config.allowed_extensions:
        raise SourceFetchError(
            f"File extension '{file_path.suffix}' not allowed. "
            f"Allowed extensions: {', '.join(config.allowed_extensions)}",
            file_path=str(file_path),
        )
    try:
        size = file_path.stat().st_size
    except OSError as exc:
        raise SourceFetchError(f"Failed to read file: {exc}", file_path=str(file_path)) from exc
    if size > config.max_file_size:
        raise SourceFetchError(
            f"File size ({size / (1024 * 1024):.1f}MB) exceeds maximum allowed size "
            f"({config.max_file_size / (1024 * 1024):.1f}MB)",
            file_path=str(file_path),
        )
    try:
        return file_path.read_bytes()
    except OSError as exc:
        raise SourceFetchError(f"Failed to read file: {exc}", file_path=str(file_path)) from exc


def load_source(source: str) -> bytes:
    """Returns the workbook bytes of a local path or a Google Sheets URL."""
    if source.startswith(("http://", "https://")):
        return fetch_google_sheet(source)
    return read_local_file(source)
