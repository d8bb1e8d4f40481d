"""String renderings of dates and datetimes."""

from datetime import date, datetime
from email.utils import format_datetime

from period.models import DateStyle


def to_date_string(day: date) -> str:
    """Format as YYYY-MM-DD (e.g. "2026-02-22")."""
    return day.strftime("%Y-%m-%d")


def to_long_date(day: date) -> str:
    """Format as "February 22, 2026".

    The day is space-padded to two characters, so the 5th reads
    "February  5, 2026".
    """
    return f"{day:%B} {day.day:>2}, {day.year}"


def to_short_date(day: date) -> str:
    """Format as "Feb 22, 2026"."""
    return f"{day:%b} {day.day}, {day.year}"


def to_iso8601(moment: datetime) -> str:
    """Format as ISO 8601, including the UTC offset when known."""
    return moment.isoformat()


def to_rfc2822(moment: datetime) -> str:
    """Format as RFC 2822 (e.g. "Sun, 22 Feb 2026 14:30:00 +0000").

    Naive datetimes are read as local time.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return format_datetime(moment)


def format_date(day: date, style: DateStyle = "iso") -> str:
    """Format a date in one of the named output styles.

    Args:
        day: Date to format.
        style: "iso", "long" or "short".

    Raises:
        ValueError: If the style is unknown.
    """
    if style == "iso":
        return to_date_string(day)
    if style == "long":
        return to_long_date(day)
    if style == "short":
        return to_short_date(day)
    raise ValueError(f"Unknown date style '{style}'. Use iso, long or short.")
