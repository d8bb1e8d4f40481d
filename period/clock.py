"""Current-time source.

Everything else in the package takes its reference instant as a parameter;
this module is the one place that reads the system clock.
"""

from datetime import date, datetime


def now() -> datetime:
    """Return the current local date and time (timezone-aware)."""
    return datetime.now().astimezone()


def today() -> date:
    """Return today's local date."""
    return now().date()
