"""Parsing of timestamps and units typed on the command line."""

from datetime import date, datetime

from dateutil import parser as dateparser

from period.clock import now

UNITS: tuple[str, ...] = ("seconds", "minutes", "hours", "days", "weeks", "months", "years")


def parse_timestamp(raw: str, default: datetime | None = None) -> datetime:
    """Parse a timestamp typed by the user.

    Accepts ISO 8601 and the other formats dateutil understands
    ("2026-02-22 14:30", "22 Feb 2026"). Values without an offset are taken
    as local time.

    Args:
        raw: Text from the command line.
        default: Datetime supplying any missing fields. Defaults to now.

    Returns:
        Timezone-aware datetime.

    Raises:
        ValueError: If the text cannot be parsed.
    """
    try:
        parsed = dateparser.parse(raw, default=default or now().replace(tzinfo=None))
        # Local offsets near year 1 or 9999 can push the value out of range
        if parsed.tzinfo is None:
            parsed = parsed.astimezone()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse timestamp '{raw}': {e}") from e
    return parsed


def parse_day(raw: str | None) -> date:
    """Parse an optional date argument, defaulting to today."""
    if raw is None:
        return now().date()
    return parse_timestamp(raw).date()


def normalize_unit(raw: str) -> str:
    """Map "day", "Days" or "days" to the plural unit name.

    Raises:
        ValueError: If the unit is not one of seconds through years.
    """
    unit = raw.lower()
    if not unit.endswith("s"):
        unit = f"{unit}s"
    if unit not in UNITS:
        raise ValueError(f"Unknown unit '{raw}'. Use one of: {', '.join(UNITS)}")
    return unit
