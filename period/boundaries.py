"""Start and end of the calendar span containing a datetime.

Start values sit at midnight, end values at 23:59:59.999999 on the last day
of the span. The tzinfo of the input is kept as-is.
"""

from datetime import datetime, time, timedelta

from period.dates import days_in_month, quarter_of
from period.models import SpanName


def start_of_day(moment: datetime) -> datetime:
    """Return midnight at the start of the moment's day."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(moment: datetime) -> datetime:
    """Return the last microsecond of the moment's day."""
    return datetime.combine(moment.date(), time.max, tzinfo=moment.tzinfo)


def start_of_week(moment: datetime, week_start: int = 0) -> datetime:
    """Return the start of the week containing the moment.

    Args:
        moment: Any datetime inside the week.
        week_start: First weekday of the week (0 = Monday ... 6 = Sunday).
    """
    offset = (moment.weekday() - week_start) % 7
    return start_of_day(moment - timedelta(days=offset))


def end_of_week(moment: datetime, week_start: int = 0) -> datetime:
    """Return the last microsecond of the week containing the moment."""
    return end_of_day(start_of_week(moment, week_start) + timedelta(days=6))


def start_of_month(moment: datetime) -> datetime:
    """Return midnight on the first day of the moment's month."""
    return start_of_day(moment.replace(day=1))


def end_of_month(moment: datetime) -> datetime:
    """Return the last microsecond of the moment's month."""
    return end_of_day(moment.replace(day=days_in_month(moment)))


def start_of_quarter(moment: datetime) -> datetime:
    """Return midnight on the first day of the moment's quarter."""
    first_month = (quarter_of(moment.date()) - 1) * 3 + 1
    return start_of_day(moment.replace(month=first_month, day=1))


def end_of_quarter(moment: datetime) -> datetime:
    """Return the last microsecond of the moment's quarter."""
    last_month = quarter_of(moment.date()) * 3
    return end_of_month(moment.replace(month=last_month, day=1))


def start_of_year(moment: datetime) -> datetime:
    """Return midnight on January 1 of the moment's year."""
    return start_of_day(moment.replace(month=1, day=1))


def end_of_year(moment: datetime) -> datetime:
    """Return the last microsecond of December 31 of the moment's year."""
    return end_of_day(moment.replace(month=12, day=31))


def span_bounds(moment: datetime, span: SpanName, week_start: int = 0) -> tuple[datetime, datetime]:
    """Return (start, end) of the named span containing the moment.

    Raises:
        ValueError: If span is not day, week, month, quarter or year.
    """
    if span == "day":
        return start_of_day(moment), end_of_day(moment)
    if span == "week":
        return start_of_week(moment, week_start), end_of_week(moment, week_start)
    if span == "month":
        return start_of_month(moment), end_of_month(moment)
    if span == "quarter":
        return start_of_quarter(moment), end_of_quarter(moment)
    if span == "year":
        return start_of_year(moment), end_of_year(moment)
    raise ValueError(f"Unknown span '{span}'. Use day, week, month, quarter or year.")
