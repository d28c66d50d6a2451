"""Cursor parsing for the paging endpoints."""

import re
from datetime import datetime

from bankpage.common.errors import CursorValidationError
from bankpage.common.models import as_utc

CURSOR_PARAM = "current_update_at"
INVALID_CURSOR_MESSAGE = "invalid timestamp"

_RFC3339 = re.compile(
    r"^\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})$"
)


def parse_cursor(raw: str | None) -> datetime:
    """Parse an RFC3339 cursor into an aware UTC datetime. An explicit offset is required."""
    if not raw:
        raise CursorValidationError(INVALID_CURSOR_MESSAGE)
    if not _RFC3339.match(raw):
        raise CursorValidationError(INVALID_CURSOR_MESSAGE)

    normalized = raw.upper()
    if normalized.endswith("Z"):
        normalized = normalized[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise CursorValidationError(INVALID_CURSOR_MESSAGE) from exc
    return as_utc(parsed)
