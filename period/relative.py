"""Relative moments: "3 days ago", "in 2 months" and friends.

Seconds through weeks are fixed-length offsets. Months and years are calendar
offsets via dateutil's relativedelta, which clamps the day of month
(March 31 minus one month is the last day of February).

Every helper accepts an optional ``reference``; when omitted the current
local time is used.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from dateutil.relativedelta import relativedelta

from period.clock import now
from period.errors import PeriodOverflowError, validate_non_negative

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Relative:
    """A resolved point in time returned by every relative helper."""

    moment: datetime

    def as_datetime(self) -> datetime:
        """The full date and time."""
        return self.moment

    def as_date(self) -> date:
        """The calendar date, discarding the time of day."""
        return self.moment.date()

    def as_time(self) -> time:
        """The time of day, discarding the date."""
        return self.moment.time()


def _resolve(reference: datetime | None) -> datetime:
    return now() if reference is None else reference


def _shift(reference: datetime | None, unit: str, amount: int, sign: int) -> Relative:
    """Move the reference by ``amount`` units in the direction of ``sign``."""
    base = _resolve(reference)
    try:
        if unit in ("months", "years"):
            months = amount * 12 if unit == "years" else amount
            moment = base + relativedelta(months=sign * months)
        else:
            moment = base + sign * timedelta(**{unit: amount})
    except (OverflowError, ValueError) as e:
        logger.debug("Rejected %s=%d from %s: %s", unit, amount, base, e)
        raise PeriodOverflowError(unit, amount) from e
    return Relative(moment)


def seconds_ago(seconds: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``seconds`` seconds before the reference."""
    validate_non_negative(seconds, "seconds", "seconds_from_now")
    return _shift(reference, "seconds", seconds, -1)


def seconds_from_now(seconds: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``seconds`` seconds after the reference."""
    validate_non_negative(seconds, "seconds", "seconds_ago")
    return _shift(reference, "seconds", seconds, 1)


def minutes_ago(minutes: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``minutes`` minutes before the reference."""
    validate_non_negative(minutes, "minutes", "minutes_from_now")
    return _shift(reference, "minutes", minutes, -1)


def minutes_from_now(minutes: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``minutes`` minutes after the reference."""
    validate_non_negative(minutes, "minutes", "minutes_ago")
    return _shift(reference, "minutes", minutes, 1)


def hours_ago(hours: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``hours`` hours before the reference."""
    validate_non_negative(hours, "hours", "hours_from_now")
    return _shift(reference, "hours", hours, -1)


def hours_from_now(hours: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``hours`` hours after the reference."""
    validate_non_negative(hours, "hours", "hours_ago")
    return _shift(reference, "hours", hours, 1)


def days_ago(days: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``days`` days before the reference.

    Args:
        days: Non-negative number of days. Zero returns the reference.
        reference: Starting instant. Defaults to the current local time.

    Returns:
        Relative wrapping the shifted datetime.

    Raises:
        NegativeValueError: If days is negative (use days_from_now instead).
        PeriodOverflowError: If the result is outside the datetime range.
    """
    validate_non_negative(days, "days", "days_from_now")
    return _shift(reference, "days", days, -1)


def days_from_now(days: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``days`` days after the reference."""
    validate_non_negative(days, "days", "days_ago")
    return _shift(reference, "days", days, 1)


def weeks_ago(weeks: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``weeks`` weeks before the reference."""
    validate_non_negative(weeks, "weeks", "weeks_from_now")
    return _shift(reference, "weeks", weeks, -1)


def weeks_from_now(weeks: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``weeks`` weeks after the reference."""
    validate_non_negative(weeks, "weeks", "weeks_ago")
    return _shift(reference, "weeks", weeks, 1)


def months_ago(months: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``months`` calendar months before the reference.

    The day of month is clamped to the length of the target month.

    Raises:
        NegativeValueError: If months is negative (use months_from_now instead).
        PeriodOverflowError: If the result is outside the datetime range.
    """
    validate_non_negative(months, "months", "months_from_now")
    return _shift(reference, "months", months, -1)


def months_from_now(months: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``months`` calendar months after the reference."""
    validate_non_negative(months, "months", "months_ago")
    return _shift(reference, "months", months, 1)


def years_ago(years: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``years`` calendar years before the reference.

    Years are applied as twelve months each, so Feb 29 maps to Feb 28.
    """
    validate_non_negative(years, "years", "years_from_now")
    return _shift(reference, "years", years, -1)


def years_from_now(years: int, *, reference: datetime | None = None) -> Relative:
    """Return the moment ``years`` calendar years after the reference."""
    validate_non_negative(years, "years", "years_ago")
    return _shift(reference, "years", years, 1)


def yesterday(reference: datetime | None = None) -> date:
    """Return the calendar date before the reference's date."""
    return _resolve(reference).date() - timedelta(days=1)


def tomorrow(reference: datetime | None = None) -> date:
    """Return the calendar date after the reference's date."""
    return _resolve(reference).date() + timedelta(days=1)
