"""Calendar truncation and "nearest occurrence" helpers.

Every function takes a reference instant and returns a ``Range`` in the
reference's zone. Calendar arithmetic ("add one month") is wall-clock
arithmetic via ``dateutil.relativedelta``; durations are then measured in
absolute time by ``Range.from_times``.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo

from dateutil.relativedelta import relativedelta

from chronoscan.models import Direction, Range


def add_calendar(t: datetime, *, years: int = 0, months: int = 0, days: int = 0) -> datetime:
    """Calendar arithmetic; day-of-month is clamped to the target month's length."""
    return t + relativedelta(years=years, months=months, days=days)


def fixed_zone(offset_hours: int) -> tzinfo:
    """A fixed UTC offset such as the one written ``UTC+8``."""
    return timezone(timedelta(hours=offset_hours))


def _midnight(t: datetime) -> datetime:
    return t.replace(hour=0, minute=0, second=0, microsecond=0)


# ---------------------------------------------------------------------------
# Truncation
# ---------------------------------------------------------------------------


def truncate_day(t: datetime) -> Range:
    """The calendar day containing ``t``."""
    start = _midnight(t)
    return Range.from_times(start, add_calendar(start, days=1))


def truncate_week(t: datetime) -> Range:
    """The Sunday-to-Saturday week containing ``t``."""
    days_since_sunday = (t.weekday() + 1) % 7
    start = _midnight(add_calendar(t, days=-days_since_sunday))
    return Range.from_times(start, add_calendar(start, days=7))


def truncate_month(t: datetime) -> Range:
    """The calendar month containing ``t``."""
    start = _midnight(t.replace(day=1))
    return Range.from_times(start, add_calendar(start, months=1))


def truncate_year(t: datetime) -> Range:
    """The calendar year containing ``t``."""
    start = _midnight(t.replace(month=1, day=1))
    return Range.from_times(start, add_calendar(start, years=1))


# ---------------------------------------------------------------------------
# Nearest occurrences
# ---------------------------------------------------------------------------


def next_specific_month(t: datetime, month: int) -> Range:
    """The next ``month`` strictly after the month of ``t``."""
    year = t.year + 1 if month <= t.month else t.year
    return truncate_month(datetime(year, month, 1, tzinfo=t.tzinfo))


def last_specific_month(t: datetime, month: int) -> Range:
    """The most recent ``month`` strictly before the month of ``t``."""
    year = t.year - 1 if month >= t.month else t.year
    return truncate_month(datetime(year, month, 1, tzinfo=t.tzinfo))


def nearest_month(t: datetime, month: int, direction: Direction) -> Range:
    if direction is Direction.FUTURE:
        return next_specific_month(t, month)
    return last_specific_month(t, month)


def next_weekday_from(t: datetime, weekday: int) -> Range:
    """The next ``weekday`` (Monday is 0) strictly after the day of ``t``."""
    days = (weekday - t.weekday()) % 7 or 7
    return truncate_day(add_calendar(t, days=days))


def last_weekday_from(t: datetime, weekday: int) -> Range:
    """The previous ``weekday`` (Monday is 0) strictly before the day of ``t``."""
    days = (t.weekday() - weekday) % 7 or 7
    return truncate_day(add_calendar(t, days=-days))


def nearest_weekday(t: datetime, weekday: int, direction: Direction) -> Range:
    if direction is Direction.FUTURE:
        return next_weekday_from(t, weekday)
    return last_weekday_from(t, weekday)
