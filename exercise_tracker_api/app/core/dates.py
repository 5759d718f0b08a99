"""
Date parsing and rendering helpers.

Exercise dates are stored as local, timezone-naive timestamps.  Clients
send calendar dates in a handful of common spellings and receive them
back as calendar-date strings such as ``Sun Jan 15 2023``.
"""

from datetime import datetime

CALENDAR_DATE_FORMAT = "%a %b %d %Y"

# Tried in order after ISO 8601 parsing fails.
_FALLBACK_FORMATS = (
    CALENDAR_DATE_FORMAT,
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
)


def parse_calendar_date(value: str) -> datetime:
    """Parse a client supplied date string.

    ISO dates and date-times are accepted as well as the calendar-date
    string produced by :func:`format_calendar_date`.  Aware date-times
    are converted to local time and made naive.  Raises ``ValueError``
    when no format matches.
    """
    text = value.strip()
    if not text:
        raise ValueError("Empty date")
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        for fmt in _FALLBACK_FORMATS:
            try:
                return datetime.strptime(text, fmt)
            except ValueError:
                continue
        raise ValueError(f"Unrecognised date: {value!r}")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def format_calendar_date(value: datetime) -> str:
    """Render ``value`` as weekday, month, day and year (``Sun Jan 15 2023``)."""
    return value.strftime(CALENDAR_DATE_FORMAT)


def to_storage(value: datetime) -> str:
    return value.isoformat(sep=" ", timespec="seconds")


def from_storage(value: str) -> datetime:
    return datetime.fromisoformat(value)
