"""Shared type definitions for period.

These NewTypes and aliases keep the public signatures readable:
- Delta: signed whole seconds between two instants (target - reference)
- DateStyle: name of a date output style
- SpanName: name of a calendar span used by the boundary helpers
"""

from typing import Literal, NewType

# Negative (or zero) means the target is in the past
Delta = NewType("Delta", int)

DateStyle = Literal["iso", "long", "short"]

SpanName = Literal["day", "week", "month", "quarter", "year"]

DATE_STYLES: tuple[str, ...] = ("iso", "long", "short")

SPAN_NAMES: tuple[str, ...] = ("day", "week", "month", "quarter", "year")

WEEKDAY_NAMES: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)
