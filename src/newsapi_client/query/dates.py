"""Validation of the ``from``/``to`` date filters."""

import re
from datetime import date, datetime

from newsapi_client.errors import ValidationError

_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_DATETIME_UTC_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", re.ASCII)
_DATETIME_OFFSET_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}", re.ASCII)


def _parses(pattern: re.Pattern[str], value: str, fmt: str) -> bool:
    if not pattern.fullmatch(value):
        return False
    try:
        datetime.strptime(value, fmt)
    except ValueError:
        return False
    return True


def validate_date(value: str, field_name: str) -> None:
    """Check a date filter against the accepted ISO 8601 shapes.

    An empty value is valid (no filter). A value containing ``T`` must be
    ``YYYY-MM-DDTHH:MM:SSZ`` or ``YYYY-MM-DDTHH:MM:SS+HH:MM``; anything else
    must be ``YYYY-MM-DD``.

    Raises:
        ValidationError: If the value matches none of the accepted shapes
            or names an impossible date or time.
    """
    if not value:
        return
    if "T" in value:
        if _parses(_DATETIME_UTC_RE, value, "%Y-%m-%dT%H:%M:%SZ"):
            return
        if _parses(_DATETIME_OFFSET_RE, value, "%Y-%m-%dT%H:%M:%S%z"):
            return
        msg = (
            f"Invalid datetime format for '{field_name}': {value}. "
            "Expected ISO 8601 format (e.g., 2024-01-01T00:00:00Z)"
        )
        raise ValidationError(msg)
    if _DATE_RE.fullmatch(value):
        try:
            date.fromisoformat(value)
            return
        except ValueError:
            pass
    msg = f"Invalid date format for '{field_name}': {value}. Expected YYYY-MM-DD format"
    raise ValidationError(msg)


def validate_and_format_date(value: str, field_name: str = "date") -> str:
    """Validate a date filter and return it unchanged."""
    validate_date(value, field_name)
    return value
