"""Turn the distance between two instants into a short English phrase.

The phrase is chosen from a fixed table of buckets keyed on the absolute
number of elapsed seconds. Thresholds are elapsed time, not calendar
boundaries: anything between 22 and 36 hours away reads "yesterday" or
"tomorrow" whether or not the calendar date actually changed. Months and
years are approximated as 30 and 365 days.

All upper bounds are exclusive, so exactly 36 hours is "1 day ago" and
exactly 90 seconds is "1 minute ago" (not "a minute ago").
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from period.clock import now
from period.models import Delta

logger = logging.getLogger(__name__)

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
# Fixed-width approximations, used only for phrasing
MONTH = 30 * DAY
YEAR = 365 * DAY

_FULL_SPAN = datetime.max - datetime.min
MAX_DELTA_SECONDS = _FULL_SPAN.days * DAY + _FULL_SPAN.seconds


@dataclass(frozen=True)
class Bucket:
    """One phrase category of the humanizer table.

    Numeric buckets set ``unit`` and ``size`` and render "N units ago";
    article buckets carry fixed ``past`` and ``future`` phrases.
    """

    name: str
    limit: int | None
    past: str = ""
    future: str = ""
    unit: str | None = None
    size: int = 1

    def phrase(self, magnitude: int, is_past: bool) -> str:
        """Render this bucket for a non-negative magnitude in seconds."""
        if self.unit is None:
            return self.past if is_past else self.future

        count = magnitude // self.size
        label = self.unit if count == 1 else f"{self.unit}s"
        if is_past:
            return f"{count} {label} ago"
        return f"in {count} {label}"


BUCKETS: tuple[Bucket, ...] = (
    Bucket("just-now", 30, past="just now", future="just now"),
    Bucket("minute", 90, past="a minute ago", future="in a minute"),
    Bucket("minutes", 45 * MINUTE, unit="minute", size=MINUTE),
    Bucket("hour", 90 * MINUTE, past="an hour ago", future="in an hour"),
    Bucket("hours", 22 * HOUR, unit="hour", size=HOUR),
    Bucket("day", 36 * HOUR, past="yesterday", future="tomorrow"),
    Bucket("days", 25 * DAY, unit="day", size=DAY),
    Bucket("month", 45 * DAY, past="a month ago", future="in a month"),
    Bucket("months", 10 * MONTH, unit="month", size=MONTH),
    Bucket("year", 18 * MONTH, past="a year ago", future="in a year"),
    Bucket("years", None, unit="year", size=YEAR),
)


def whole_seconds(delta: timedelta) -> Delta:
    """Convert a timedelta to signed whole seconds, truncating toward zero."""
    micros = (delta.days * DAY + delta.seconds) * 1_000_000 + delta.microseconds
    seconds = abs(micros) // 1_000_000
    return Delta(-seconds if micros < 0 else seconds)


def select_bucket(magnitude: int) -> Bucket:
    """Return the first bucket whose upper bound exceeds ``magnitude``.

    The final bucket has no bound and catches everything else.
    """
    for bucket in BUCKETS:
        if bucket.limit is None or magnitude < bucket.limit:
            return bucket
    return BUCKETS[-1]


def humanize_delta(delta: int | timedelta) -> str:
    """Describe a signed elapsed duration.

    Args:
        delta: Target minus reference, in seconds or as a timedelta. Zero or
            negative reads as the past, positive as the future.

    Returns:
        Phrase such as "5 minutes ago", "tomorrow" or "in 3 years".
    """
    if isinstance(delta, timedelta):
        delta = whole_seconds(delta)

    magnitude = abs(delta)
    if magnitude > MAX_DELTA_SECONDS:
        logger.debug("Saturating delta of %d seconds to %d", delta, MAX_DELTA_SECONDS)
        magnitude = MAX_DELTA_SECONDS

    return select_bucket(magnitude).phrase(magnitude, is_past=delta <= 0)


def humanize(target: datetime, reference: datetime) -> str:
    """Describe ``target`` relative to an explicit ``reference`` instant.

    If exactly one of the two is naive it is read as wall time in the other's
    timezone, so mixed inputs never raise.

    Args:
        target: Instant being described.
        reference: Instant treated as "now".

    Returns:
        Phrase such as "an hour ago" or "in 2 days".
    """
    if target.tzinfo is None and reference.tzinfo is not None:
        target = target.replace(tzinfo=reference.tzinfo)
    elif reference.tzinfo is None and target.tzinfo is not None:
        reference = reference.replace(tzinfo=target.tzinfo)

    return humanize_delta(whole_seconds(target - reference))


def humanize_now(target: datetime, clock: Callable[[], datetime] = now) -> str:
    """Describe ``target`` relative to the current time read from ``clock``."""
    return humanize(target, clock())
