"""Calendar facts for a single date.

Pure functions over the proleptic Gregorian calendar.
"""

import calendar
from datetime import date, timedelta


def is_weekend(day: date) -> bool:
    """Return True if the date falls on a Saturday or Sunday."""
    return day.weekday() >= 5


def is_weekday(day: date) -> bool:
    """Return True if the date falls on Monday through Friday."""
    return not is_weekend(day)


def day_of_year(day: date) -> int:
    """Return the 1-based ordinal day within the year (1-366)."""
    return day.timetuple().tm_yday


def quarter_of(day: date) -> int:
    """Return the calendar quarter (1-4) containing the date."""
    return (day.month - 1) // 3 + 1


def week_of_year(day: date) -> int:
    """Return the ISO 8601 week number (1-53).

    Weeks start on Monday and week 1 is the week holding the first Thursday,
    so early January can belong to week 52 or 53 of the previous year.
    """
    return day.isocalendar()[1]


def month_range(year: int, month: int) -> tuple[date, date]:
    """Calculate the half-open date range covering a month.

    Args:
        year: Four-digit year.
        month: Month number (1-12).

    Returns:
        Tuple of (first_day, first_day_of_next_month).

    Raises:
        ValueError: If the month is not 1-12 or the year is out of range.
        OverflowError: For December 9999, whose next month is unrepresentable.
    """
    first = date(year, month, 1)
    # Day 28 exists in every month; four days later is always next month
    next_first = (first.replace(day=28) + timedelta(days=4)).replace(day=1)
    return first, next_first


def days_in_month(day: date) -> int:
    """Return the number of days (28-31) in the date's month.

    Works for December 9999, where month_range cannot build the next month.
    """
    return calendar.monthrange(day.year, day.month)[1]
