"""Tests for the implicit range grammar.

Tests for:
- Keyword days and last/this/next periods
- Quantities with ago/hence/from now
- Futures color months and weekday names
- Strict timestamps
- Generic multi-word dates
"""

from datetime import datetime, timedelta, timezone

import pytest

from chronoscan import Direction, InvalidTimestampError, NoRangeFoundError, Range, parse_implicit_range
from chronoscan.periods import fixed_zone, truncate_day, truncate_month, truncate_week, truncate_year

UTC = timezone.utc


def day(year, month, dom, tz=UTC):
    return truncate_day(datetime(year, month, dom, tzinfo=tz))


def week_of(year, month, dom):
    return truncate_week(datetime(year, month, dom, tzinfo=UTC))


def month_of(year, month):
    return truncate_month(datetime(year, month, 1, tzinfo=UTC))


def year_of(year):
    return truncate_year(datetime(year, 1, 1, tzinfo=UTC))


# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------


class TestKeywordDays:
    def test_now_is_one_second(self, now, any_direction):
        found, matched = parse_implicit_range("now", now, any_direction)

        assert found == Range(now, timedelta(seconds=1))
        assert matched == "now"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("yesterday", day(2022, 9, 28)),
            ("Today", day(2022, 9, 29)),
            ("TOMORROW", day(2022, 9, 30)),
        ],
    )
    def test_relative_days(self, now, any_direction, text, expected):
        found, matched = parse_implicit_range(text, now, any_direction)

        assert found == expected
        assert matched == text


class TestRelativePeriods:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("last week", week_of(2022, 9, 18)),
            ("this week", week_of(2022, 9, 25)),
            ("next week", week_of(2022, 10, 2)),
            ("last month", month_of(2022, 8)),
            ("this month", month_of(2022, 9)),
            ("next month", month_of(2022, 10)),
            ("last year", year_of(2021)),
            ("this year", year_of(2022)),
            ("next year", year_of(2023)),
            ("Last  Year", year_of(2021)),
        ],
    )
    def test_period(self, now, any_direction, text, expected):
        found, matched = parse_implicit_range(text, now, any_direction)

        assert found == expected
        assert matched == text

    def test_week_is_sunday_to_saturday(self, now):
        found, _ = parse_implicit_range("last week", now, Direction.PAST)

        assert found.start == datetime(2022, 9, 18, tzinfo=UTC)
        assert found.end == datetime(2022, 9, 25, tzinfo=UTC)

    def test_stops_after_period_word(self, now):
        _, matched = parse_implicit_range("last year week", now, Direction.FUTURE)

        assert matched == "last year"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("last december", month_of(2021, 12)),
            ("next jan", month_of(2023, 1)),
            ("next september", month_of(2023, 9)),
            ("last september", month_of(2021, 9)),
            ("next october", month_of(2022, 10)),
        ],
    )
    def test_month_name(self, now, any_direction, text, expected):
        found, _ = parse_implicit_range(text, now, any_direction)

        assert found == expected

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("next monday", day(2022, 10, 3)),
            ("last friday", day(2022, 9, 23)),
            ("next thursday", day(2022, 10, 6)),
            ("last thursday", day(2022, 9, 22)),
        ],
    )
    def test_weekday_name(self, now, any_direction, text, expected):
        found, _ = parse_implicit_range(text, now, any_direction)

        assert found == expected

    @pytest.mark.parametrize("text", ["this december", "last fortnight", "next 2 months", "last mon"])
    def test_not_a_period(self, now, text):
        with pytest.raises(NoRangeFoundError):
            parse_implicit_range(text, now, Direction.FUTURE)


# ---------------------------------------------------------------------------
# Quantities
# ---------------------------------------------------------------------------


class TestQuantities:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("3 days ago", day(2022, 9, 26)),
            ("One day ago", day(2022, 9, 28)),
            ("1 day from now", day(2022, 9, 30)),
            ("two days from today", day(2022, 10, 1)),
            ("two days hence", day(2022, 10, 1)),
            ("1 week ago", week_of(2022, 9, 18)),
            ("2 weeks ago", week_of(2022, 9, 11)),
            ("A week from now", week_of(2022, 10, 2)),
            ("2 weeks hence", week_of(2022, 10, 9)),
            ("A month ago", month_of(2022, 8)),
            ("12 months ago", month_of(2021, 9)),
            ("twelve months ago", month_of(2021, 9)),
            ("2 months from now", month_of(2022, 11)),
            ("One year ago", year_of(2021)),
            ("Two years ago", year_of(2020)),
            ("ten years hence", year_of(2032)),
        ],
    )
    def test_quantity(self, now, any_direction, text, expected):
        found, matched = parse_implicit_range(text, now, any_direction)

        assert found == expected
        assert matched == text

    @pytest.mark.parametrize("text", ["1 day", "3 days from tomorrow", "3 fortnights ago", "1 days later"])
    def test_incomplete_quantity(self, now, text):
        with pytest.raises(NoRangeFoundError):
            parse_implicit_range(text, now, Direction.FUTURE)

    def test_calendar_overflow_is_a_miss(self, now):
        with pytest.raises(NoRangeFoundError):
            parse_implicit_range("999999999999 years hence", now, Direction.FUTURE)

    def test_huge_number_is_not_a_number(self, now):
        with pytest.raises(NoRangeFoundError):
            parse_implicit_range("9" * 5000 + " days ago", now, Direction.FUTURE)


class TestEraYears:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1999 AD", year_of(1999)),
            ("1999AD", year_of(1999)),
            ("2008 CE", year_of(2008)),
            ("2008ce", year_of(2008)),
        ],
    )
    def test_era_year(self, now, any_direction, text, expected):
        found, matched = parse_implicit_range(text, now, any_direction)

        assert found == expected
        assert matched == text

    @pytest.mark.parametrize("text", ["1999", "5 ad", "9999ad", "9999 AD"])
    def test_not_an_era_year(self, now, text):
        with pytest.raises(NoRangeFoundError):
            parse_implicit_range(text, now, Direction.PAST)


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


class TestColorMonths:
    """Futures colors name the upcoming month plus a number of years."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("white october", month_of(2022, 10)),
            ("Red October", month_of(2023, 10)),
            ("green march", month_of(2025, 3)),
            ("blue september", month_of(2026, 9)),
            ("copper dec", month_of(2031, 12)),
        ],
    )
    def test_color_month(self, now, any_direction, text, expected):
        found, matched = parse_implicit_range(text, now, any_direction)

        assert found == expected
        assert matched == text

    def test_color_without_month(self, now):
        with pytest.raises(NoRangeFoundError):
            parse_implicit_range("red wine", now, Direction.FUTURE)


class TestWeekdays:
    def test_future(self, now):
        found, _ = parse_implicit_range("thursday", now, Direction.FUTURE)

        assert found == day(2022, 10, 6)

    def test_past(self, now):
        found, _ = parse_implicit_range("Thursday", now, Direction.PAST)

        assert found == day(2022, 9, 22)

    def test_sunday(self, now):
        assert parse_implicit_range("sunday", now, Direction.FUTURE)[0] == day(2022, 10, 2)
        assert parse_implicit_range("sunday", now, Direction.PAST)[0] == day(2022, 9, 25)


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------


class TestStrictTimestamps:
    def test_utc(self, now, any_direction):
        found, matched = parse_implicit_range("2006-01-02T15:04:05Z", now, any_direction)

        assert found == Range(datetime(2006, 1, 2, 15, 4, 5, tzinfo=UTC), timedelta(seconds=1))
        assert matched == "2006-01-02T15:04:05Z"

    def test_offset(self, now, any_direction):
        found, _ = parse_implicit_range("1990-12-31T15:59:59-08:00", now, any_direction)

        assert found.start == datetime(1990, 12, 31, 15, 59, 59, tzinfo=fixed_zone(-8))
        assert found.duration == timedelta(seconds=1)

    @pytest.mark.parametrize("text", ["2022-13-45T10:00:00Z", "2022-02-30T10:00:00Z", "2022-01-01T10:61:00+01:00"])
    def test_invalid_instant_raises(self, now, text):
        with pytest.raises(InvalidTimestampError):
            parse_implicit_range(text, now, Direction.FUTURE)

    @pytest.mark.parametrize("text", ["2022-09-29T24:00:00Z", "2022-09-29T25:00:00+01:00"])
    def test_hour_out_of_range_is_a_generic_date(self, now, text):
        """Hours past 23 are not timestamps; the date part still reads as a day."""
        found, matched = parse_implicit_range(text, now, Direction.FUTURE)

        assert found == day(2022, 9, 29)
        assert matched == text

    def test_without_zone_is_a_generic_date(self, now):
        found, matched = parse_implicit_range("2006-01-02T15:04:05", now, Direction.FUTURE)

        assert found == day(2006, 1, 2)
        assert matched == "2006-01-02T15:04:05"


# ---------------------------------------------------------------------------
# Generic dates
# ---------------------------------------------------------------------------


class TestGenericDates:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("January 2017", month_of(2017, 1)),
            ("Jan 2017", month_of(2017, 1)),
            ("January, 2017", month_of(2017, 1)),
            ("March 31", day(2023, 3, 31)),
            ("April 3 2017", day(2017, 4, 3)),
            ("April 3, 2017", day(2017, 4, 3)),
            ("Oct. 7, 1970", day(1970, 10, 7)),
            ("Oct 7, 1970 UTC+3", day(1970, 10, 7, fixed_zone(3))),
            ("September 17, 2012 UTC-7", day(2012, 9, 17, fixed_zone(-7))),
            ("7 oct, 1970", day(1970, 10, 7)),
            ("03 February 2013", day(2013, 2, 3)),
            ("2 July 2013", day(2013, 7, 2)),
            ("2022 Feb 1", day(2022, 2, 1)),
            ("2014/3/31", day(2014, 3, 31)),
            ("2014/3/31 UTC", day(2014, 3, 31)),
            ("31/3/2014 UTC-8", day(2014, 3, 31, fixed_zone(-8))),
            ("31-3-2014", day(2014, 3, 31)),
            ("7th oct 1970", day(1970, 10, 7)),
        ],
    )
    def test_generic_date(self, now, text, expected):
        found, matched = parse_implicit_range(text, now, Direction.FUTURE)

        assert found == expected
        assert matched == text

    def test_direction_resolves_month(self, now):
        assert parse_implicit_range("December", now, Direction.FUTURE)[0] == month_of(2022, 12)
        assert parse_implicit_range("December", now, Direction.PAST)[0] == month_of(2021, 12)

    def test_direction_resolves_month_and_day(self, now):
        assert parse_implicit_range("Dec 20", now, Direction.FUTURE)[0] == day(2022, 12, 20)
        assert parse_implicit_range("Dec 20", now, Direction.PAST)[0] == day(2021, 12, 20)

    def test_day_after_year_is_left_over(self, now):
        found, matched = parse_implicit_range("Jan 2017 1", now, Direction.FUTURE)

        assert found == month_of(2017, 1)
        assert matched == "Jan 2017"

    @pytest.mark.parametrize("text", ["1 2017 Jan", "1999", "10", "31/2/2014", "February 30 2022", "10:am", "hello"])
    def test_not_a_date(self, now, text):
        with pytest.raises(NoRangeFoundError):
            parse_implicit_range(text, now, Direction.FUTURE)


# ---------------------------------------------------------------------------
# Entry point behaviour
# ---------------------------------------------------------------------------


class TestParseImplicitRange:
    def test_leading_noise_is_not_matched(self, now):
        found, matched = parse_implicit_range("  (today) ", now, Direction.FUTURE)

        assert found == day(2022, 9, 29)
        assert matched == "today"

    @pytest.mark.parametrize("text", ["", "   ", ",,, ..."])
    def test_empty(self, now, text):
        with pytest.raises(NoRangeFoundError):
            parse_implicit_range(text, now, Direction.FUTURE)

    def test_only_first_word_is_tried(self, now):
        with pytest.raises(NoRangeFoundError):
            parse_implicit_range("remind me tomorrow", now, Direction.FUTURE)

    def test_case_insensitive(self, now):
        assert parse_implicit_range("LAST WEEK", now, Direction.FUTURE)[0] == parse_implicit_range(
            "last week", now, Direction.FUTURE
        )[0]

    def test_reference_zone_is_kept(self):
        plus_eight = fixed_zone(8)
        local_now = datetime(2022, 9, 29, 23, 30, tzinfo=plus_eight)

        found, _ = parse_implicit_range("today", local_now, Direction.FUTURE)

        assert found == day(2022, 9, 29, plus_eight)
        assert found.start.utcoffset() == timedelta(hours=8)

    def test_error_details(self, now):
        with pytest.raises(NoRangeFoundError) as excinfo:
            parse_implicit_range("  hello", now, Direction.FUTURE)

        assert excinfo.value.details == {"position": 2, "word": "hello"}
        assert excinfo.value.recoverable
