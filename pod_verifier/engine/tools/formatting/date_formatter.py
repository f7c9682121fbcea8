# Path: pod_verifier/engine/tools/formatting/date_formatter.py
"""
Date and timestamp rendering for entry display.

Everything is rendered in UTC so output does not depend on the
machine's local timezone.
"""

from datetime import date, datetime, timezone
from typing import Any, Optional

from ...constants.display import TIMESTAMP_FORMAT, TIMESTAMP_CLOCK, DATE_CLOCK


def _render(moment: datetime, clock: str) -> str:
    return TIMESTAMP_FORMAT.format(
        month=moment.strftime('%B'),
        day=moment.day,
        year=moment.year,
        clock=moment.strftime(clock),
    )


def parse_iso_datetime(text: str) -> Optional[datetime]:
    """
    Parse ISO-8601 text into an aware UTC datetime.

    A trailing 'Z' is accepted. Text without an offset is taken as UTC.
    Returns None when the text is not an ISO date.
    """
    candidate = text.strip()
    if candidate[-1:] in ('Z', 'z'):
        candidate = candidate[:-1] + '+00:00'

    try:
        moment = datetime.fromisoformat(candidate)
    except ValueError:
        return None

    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def format_timestamp(timestamp: Any) -> str:
    """
    Render epoch milliseconds as a readable UTC date and time.

    Numeric text is accepted. Unusable input is returned as text.

    Example:
        format_timestamp(1731226670791)
        # -> 'November 10, 2024, 08:17:50 AM UTC'
    """
    try:
        millis = int(timestamp) if isinstance(timestamp, str) else timestamp
        moment = datetime.fromtimestamp(millis / 1000, tz=timezone.utc)
    except (ValueError, TypeError, OverflowError, OSError):
        return str(timestamp)
    return _render(moment, TIMESTAMP_CLOCK)


def format_date_string(text: str) -> str:
    """
    Render an ISO date string as a readable UTC date and time.

    Text that is not an ISO date is returned unchanged.
    """
    moment = parse_iso_datetime(text)
    if moment is None:
        return text
    return _render(moment, DATE_CLOCK)


def iso_display(value: Any) -> str:
    """ISO text for date values, plain text for anything else."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


__all__ = [
    'parse_iso_datetime',
    'format_timestamp',
    'format_date_string',
    'iso_display',
]
