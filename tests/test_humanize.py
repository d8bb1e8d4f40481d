"""Tests for period.humanize pure functions."""

from datetime import datetime, timedelta, timezone

from period.humanize import (
    BUCKETS,
    DAY,
    HOUR,
    MAX_DELTA_SECONDS,
    MINUTE,
    MONTH,
    YEAR,
    humanize,
    humanize_delta,
    humanize_now,
    select_bucket,
    whole_seconds,
)

REF = datetime(2026, 2, 22, 12, 0, tzinfo=timezone.utc)


def past(seconds: int) -> str:
    return humanize(REF - timedelta(seconds=seconds), REF)


def future(seconds: int) -> str:
    return humanize(REF + timedelta(seconds=seconds), REF)


class TestJustNow:
    """Tests for the just-now bucket."""

    def test_identical_instants(self) -> None:
        """Should read "just now" for a zero delta."""
        assert humanize(REF, REF) == "just now"

    def test_under_thirty_seconds_either_direction(self) -> None:
        """Should ignore direction below 30 seconds."""
        for seconds in range(30):
            assert past(seconds) == "just now"
            assert future(seconds) == "just now"


class TestMinutes:
    """Tests for the minute article and numeric buckets."""

    def test_thirty_seconds_is_a_minute(self) -> None:
        """Should switch to the article form at exactly 30 seconds."""
        assert past(30) == "a minute ago"
        assert future(30) == "in a minute"

    def test_article_form_up_to_89_seconds(self) -> None:
        """Should use the article form for 30-89 seconds."""
        for seconds in range(30, 90):
            assert past(seconds) == "a minute ago"
            assert future(seconds) == "in a minute"

    def test_ninety_seconds_is_numeric(self) -> None:
        """Should read "1 minute ago" at 90 seconds, not "a minute ago"."""
        assert past(90) == "1 minute ago"
        assert future(90) == "in 1 minute"

    def test_minutes_truncate(self) -> None:
        """Should floor-divide seconds by 60."""
        assert past(119) == "1 minute ago"
        assert past(120) == "2 minutes ago"
        assert future(5 * MINUTE + 59) == "in 5 minutes"

    def test_numeric_minutes_range(self) -> None:
        """Should render N = seconds // 60 across the whole bucket."""
        for seconds in range(90, 45 * MINUTE, 7):
            n = seconds // 60
            unit = "minute" if n == 1 else "minutes"
            assert past(seconds) == f"{n} {unit} ago"

    def test_last_numeric_minute(self) -> None:
        """Should still count minutes just below 45 minutes."""
        assert past(44 * MINUTE) == "44 minutes ago"
        assert past(45 * MINUTE - 1) == "44 minutes ago"


class TestHours:
    """Tests for the hour article and numeric buckets."""

    def test_forty_five_minutes_is_an_hour(self) -> None:
        """Should switch to "an hour" at exactly 45 minutes."""
        assert past(45 * MINUTE) == "an hour ago"
        assert future(45 * MINUTE) == "in an hour"

    def test_just_under_ninety_minutes(self) -> None:
        """Should keep the article form up to 5399 seconds."""
        assert past(5399) == "an hour ago"

    def test_ninety_minutes_is_one_hour(self) -> None:
        """Should read "1 hour ago" from 90 minutes."""
        assert past(90 * MINUTE) == "1 hour ago"
        assert future(90 * MINUTE) == "in 1 hour"

    def test_hours_truncate(self) -> None:
        """Should floor-divide seconds by 3600."""
        assert past(5 * HOUR) == "5 hours ago"
        assert past(79199) == "21 hours ago"


class TestYesterdayTomorrow:
    """Tests for the yesterday/tomorrow bucket."""

    def test_twenty_two_hours(self) -> None:
        """Should start at exactly 22 hours."""
        assert past(22 * HOUR) == "yesterday"
        assert future(22 * HOUR) == "tomorrow"

    def test_ignores_calendar_dates(self) -> None:
        """Should depend on elapsed time only, not on the calendar day."""
        reference = datetime(2026, 2, 22, 23, 0, tzinfo=timezone.utc)
        midnight_same_day = datetime(2026, 2, 22, 0, 0, tzinfo=timezone.utc)
        late_previous_day = datetime(2026, 2, 21, 23, 30, tzinfo=timezone.utc)

        assert humanize(midnight_same_day, reference) == "yesterday"
        assert humanize(late_previous_day, datetime(2026, 2, 22, 0, 30, tzinfo=timezone.utc)) == "an hour ago"

    def test_thirty_six_hour_boundary_is_exclusive(self) -> None:
        """Should read "yesterday" below 36 hours and "1 day ago" at 36 hours."""
        assert past(36 * HOUR - 1) == "yesterday"
        assert past(36 * HOUR) == "1 day ago"
        assert future(36 * HOUR - 1) == "tomorrow"
        assert future(36 * HOUR) == "in 1 day"


class TestDaysMonthsYears:
    """Tests for the day, month and year buckets."""

    def test_days(self) -> None:
        """Should count whole days below 25 days."""
        assert past(5 * DAY) == "5 days ago"
        assert past(24 * DAY) == "24 days ago"
        assert future(2 * DAY) == "in 2 days"

    def test_twenty_five_days_is_a_month(self) -> None:
        """Should use the month article form from 25 to 44 days."""
        assert past(25 * DAY) == "a month ago"
        assert past(45 * DAY - 1) == "a month ago"
        assert future(30 * DAY) == "in a month"

    def test_months_use_thirty_day_months(self) -> None:
        """Should divide by 30 days, not by calendar months."""
        assert past(45 * DAY) == "1 month ago"
        assert past(59 * DAY) == "1 month ago"
        assert past(60 * DAY) == "2 months ago"
        assert past(9 * MONTH) == "9 months ago"
        assert future(3 * MONTH) == "in 3 months"

    def test_ten_months_is_a_year(self) -> None:
        """Should switch to "a year" at 300 days."""
        assert past(10 * MONTH) == "a year ago"
        assert past(18 * MONTH - 1) == "a year ago"
        assert future(13 * MONTH) == "in a year"

    def test_years_use_365_day_years(self) -> None:
        """Should divide by 365 days from 540 days on."""
        assert past(18 * MONTH) == "1 year ago"
        assert future(18 * MONTH) == "in 1 year"
        assert past(3 * YEAR) == "3 years ago"
        assert future(3 * YEAR) == "in 3 years"


class TestExtremes:
    """Tests for saturation at the edges of the datetime range."""

    def test_full_datetime_range(self) -> None:
        """Should describe datetime.min vs datetime.max as a year count."""
        assert humanize(datetime.min, datetime.max) == "10005 years ago"
        assert humanize(datetime.max, datetime.min) == "in 10005 years"

    def test_huge_delta_saturates(self) -> None:
        """Should clamp deltas beyond the representable span."""
        expected = MAX_DELTA_SECONDS // YEAR

        assert humanize_delta(-(10**30)) == f"{expected} years ago"
        assert humanize_delta(10**30) == f"in {expected} years"

    def test_max_delta_is_whole_span(self) -> None:
        """Should equal datetime.max - datetime.min in whole seconds."""
        assert MAX_DELTA_SECONDS == 315537897599


class TestHumanizeDelta:
    """Tests for humanize_delta."""

    def test_accepts_timedelta(self) -> None:
        """Should accept a timedelta as well as seconds."""
        assert humanize_delta(timedelta(minutes=-5)) == "5 minutes ago"
        assert humanize_delta(timedelta(days=3)) == "in 3 days"

    def test_timedelta_truncates_toward_zero(self) -> None:
        """Should drop sub-second remainders in both directions."""
        assert humanize_delta(timedelta(seconds=-89.5)) == "a minute ago"
        assert humanize_delta(timedelta(seconds=89, microseconds=999999)) == "in a minute"

    def test_direction_symmetry(self) -> None:
        """Should produce the "in ..." form for every negated past phrase."""
        samples = [30, 90, 600, 45 * MINUTE, 3 * HOUR, 30 * HOUR, 4 * DAY, 30 * DAY, 4 * MONTH, YEAR, 5 * YEAR]
        for magnitude in samples:
            past_phrase = humanize_delta(-magnitude)
            future_phrase = humanize_delta(magnitude)
            if past_phrase == "yesterday":
                assert future_phrase == "tomorrow"
            else:
                assert past_phrase.endswith(" ago")
                assert future_phrase == f"in {past_phrase.removesuffix(' ago')}"

    def test_idempotent(self) -> None:
        """Should return the same phrase for the same arguments."""
        target = REF - timedelta(hours=7)
        assert humanize(target, REF) == humanize(target, REF)


class TestSelectBucket:
    """Tests for select_bucket and the bucket table."""

    def test_buckets_are_contiguous(self) -> None:
        """Should hand off to the next bucket exactly at each upper bound."""
        for current, following in zip(BUCKETS, BUCKETS[1:]):
            assert current.limit is not None
            assert select_bucket(current.limit - 1) is current
            assert select_bucket(current.limit) is following

    def test_bounds_ascend(self) -> None:
        """Should list bounded buckets in ascending order."""
        limits = [bucket.limit for bucket in BUCKETS[:-1]]
        assert limits == sorted(limits)

    def test_catch_all_last(self) -> None:
        """Should end with the unbounded years bucket."""
        assert BUCKETS[-1].limit is None
        assert select_bucket(MAX_DELTA_SECONDS).name == "years"

    def test_zero_is_just_now(self) -> None:
        """Should put zero in the first bucket."""
        assert select_bucket(0).name == "just-now"


class TestMixedInstants:
    """Tests for naive, aware and mixed inputs to humanize."""

    def test_naive_target_takes_reference_zone(self) -> None:
        """Should read a naive target as wall time in the reference's zone."""
        assert humanize(datetime(2026, 2, 22, 11, 0), REF) == "an hour ago"

    def test_naive_reference_takes_target_zone(self) -> None:
        """Should read a naive reference as wall time in the target's zone."""
        assert humanize(REF + timedelta(hours=3), datetime(2026, 2, 22, 12, 0)) == "in 3 hours"

    def test_different_offsets_compare_absolute_time(self) -> None:
        """Should compare aware instants in absolute time."""
        plus_one = timezone(timedelta(hours=1))
        assert humanize(datetime(2026, 2, 22, 13, 0, tzinfo=plus_one), REF) == "just now"

    def test_both_naive(self) -> None:
        """Should subtract two naive datetimes directly."""
        assert humanize(datetime(2026, 2, 20, 12, 0), datetime(2026, 2, 22, 12, 0)) == "2 days ago"


class TestHumanizeNow:
    """Tests for humanize_now."""

    def test_uses_supplied_clock(self) -> None:
        """Should read the reference from the clock callable."""
        assert humanize_now(REF - timedelta(hours=2), clock=lambda: REF) == "2 hours ago"

    def test_defaults_to_system_clock(self) -> None:
        """Should describe a moment well in the past against the real clock."""
        assert humanize_now(datetime(2000, 1, 1, tzinfo=timezone.utc)).endswith("years ago")


class TestWholeSeconds:
    """Tests for whole_seconds."""

    def test_positive(self) -> None:
        """Should drop microseconds of a positive delta."""
        assert whole_seconds(timedelta(seconds=1, microseconds=999999)) == 1

    def test_negative(self) -> None:
        """Should truncate negative deltas toward zero."""
        assert whole_seconds(timedelta(seconds=-1.5)) == -1
        assert whole_seconds(timedelta(microseconds=-1)) == 0

    def test_days(self) -> None:
        """Should include whole days."""
        assert whole_seconds(timedelta(days=-2)) == -2 * DAY
