"""period - human-friendly relative dates and times.

Usage:
    from datetime import datetime, timedelta
    from period import humanize, days_ago, end_of_month

    ref = datetime(2026, 2, 22, 12, 0)
    humanize(ref - timedelta(hours=3), ref)   # "3 hours ago"
    days_ago(3, reference=ref).as_date()      # date(2026, 2, 19)
    end_of_month(ref)                         # 2026-02-28 23:59:59.999999
"""

__version__ = "0.1.0"

from period.boundaries import (
    end_of_day,
    end_of_month,
    end_of_quarter,
    end_of_week,
    end_of_year,
    span_bounds,
    start_of_day,
    start_of_month,
    start_of_quarter,
    start_of_week,
    start_of_year,
)
from period.clock import now, today
from period.dates import day_of_year, days_in_month, is_weekday, is_weekend, month_range, quarter_of, week_of_year
from period.errors import NegativeValueError, PeriodError, PeriodOverflowError
from period.formatting import format_date, to_date_string, to_iso8601, to_long_date, to_rfc2822, to_short_date
from period.humanize import humanize, humanize_delta, humanize_now
from period.relative import (
    Relative,
    days_ago,
    days_from_now,
    hours_ago,
    hours_from_now,
    minutes_ago,
    minutes_from_now,
    months_ago,
    months_from_now,
    seconds_ago,
    seconds_from_now,
    tomorrow,
    weeks_ago,
    weeks_from_now,
    years_ago,
    years_from_now,
    yesterday,
)

__all__ = [
    "Relative",
    "PeriodError",
    "NegativeValueError",
    "PeriodOverflowError",
    "humanize",
    "humanize_delta",
    "humanize_now",
    "now",
    "today",
    "seconds_ago",
    "seconds_from_now",
    "minutes_ago",
    "minutes_from_now",
    "hours_ago",
    "hours_from_now",
    "days_ago",
    "days_from_now",
    "weeks_ago",
    "weeks_from_now",
    "months_ago",
    "months_from_now",
    "years_ago",
    "years_from_now",
    "yesterday",
    "tomorrow",
    "is_weekend",
    "is_weekday",
    "day_of_year",
    "days_in_month",
    "week_of_year",
    "quarter_of",
    "month_range",
    "start_of_day",
    "end_of_day",
    "start_of_week",
    "end_of_week",
    "start_of_month",
    "end_of_month",
    "start_of_quarter",
    "end_of_quarter",
    "start_of_year",
    "end_of_year",
    "span_bounds",
    "to_date_string",
    "to_long_date",
    "to_short_date",
    "to_iso8601",
    "to_rfc2822",
    "format_date",
]
