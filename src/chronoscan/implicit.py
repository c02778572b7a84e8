"""Implicit ranges: date expressions that stand on their own.

Rules are tried in a fixed order against the first word(s) of the text and
the first one that matches wins, regardless of how much text a later rule
might have consumed:

1. keyword days: now, yesterday, today, tomorrow
2. last/this/next + week|month|year, and last/next + month or weekday name
3. quantities: "3 days ago", "a week from now", "two years hence", "1999 AD"
4. futures color + month: "red october"
5. bare weekday name, resolved by direction: "thursday"
6. strict timestamps: 2006-01-02T15:04:05Z
7. generic multi-word dates: "Oct. 7, 1970 UTC+3", "3 feb", "2014/03/31"
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Callable, Optional, Tuple

from dateutil.parser import isoparse

from chronoscan.accumulator import accumulate_date_words
from chronoscan.exceptions import InvalidTimestampError, NoRangeFoundError
from chronoscan.inference import infer_range
from chronoscan.lexicon import (
    COLOR_YEAR_OFFSETS,
    ERA_SUFFIXES,
    FROM_ANCHORS,
    FUTURE_MARKERS,
    MONTH_NAMES,
    PAST_MARKERS,
    QUANTITY_UNITS,
    RELATIVE_DAY_OFFSETS,
    RELATIVE_PERIOD_OFFSETS,
    WEEKDAY_NAMES,
    parse_quantity,
)
from chronoscan.models import Direction, Range
from chronoscan.periods import (
    add_calendar,
    last_specific_month,
    last_weekday_from,
    nearest_weekday,
    next_specific_month,
    next_weekday_from,
    truncate_day,
    truncate_month,
    truncate_week,
    truncate_year,
)
from chronoscan.scanner import find_signal_noise

logger = logging.getLogger(__name__)

STRICT_TIMESTAMP_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2}T(?:[01][0-9]|2[0-3]):[0-9]{2}:[0-9]{2}(?:Z|[+-][0-9]{2}:[0-9]{2})"
)

# (range, offset just past the consumed text)
RuleMatch = Optional[Tuple[Range, int]]
Rule = Callable[[str, int, int, str, datetime, Direction], RuleMatch]


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _keyword_day(s: str, start: int, end: int, word: str, now: datetime, direction: Direction) -> RuleMatch:
    if word == "now":
        return Range(now, timedelta(seconds=1)), end
    if word in RELATIVE_DAY_OFFSETS:
        return truncate_day(add_calendar(now, days=RELATIVE_DAY_OFFSETS[word])), end
    return None


def _relative_period(s: str, start: int, end: int, word: str, now: datetime, direction: Direction) -> RuleMatch:
    if word not in RELATIVE_PERIOD_OFFSETS:
        return None
    offset = RELATIVE_PERIOD_OFFSETS[word]
    _, second_end, second = find_signal_noise(s, end)

    if second == "week":
        return truncate_week(add_calendar(now, days=7 * offset)), second_end
    if second == "month":
        return truncate_month(add_calendar(now, months=offset)), second_end
    if second == "year":
        return truncate_year(add_calendar(now, years=offset)), second_end

    if offset == 0:
        return None
    if second in MONTH_NAMES:
        month = MONTH_NAMES[second]
        found = next_specific_month(now, month) if offset > 0 else last_specific_month(now, month)
        return found, second_end
    if second in WEEKDAY_NAMES:
        weekday = WEEKDAY_NAMES[second]
        found = next_weekday_from(now, weekday) if offset > 0 else last_weekday_from(now, weekday)
        return found, second_end
    return None


def _quantity(s: str, start: int, end: int, word: str, now: datetime, direction: Direction) -> RuleMatch:
    amount = parse_quantity(word)
    if amount is None:
        return None
    _, unit_end, unit_word = find_signal_noise(s, end)

    if 1000 <= amount <= 9999 and unit_word in ERA_SUFFIXES:
        return truncate_year(datetime(amount, 1, 1, tzinfo=now.tzinfo)), unit_end

    unit = QUANTITY_UNITS.get(unit_word)
    if unit is None:
        return None

    _, marker_end, marker = find_signal_noise(s, unit_end)
    if marker in PAST_MARKERS:
        amount, consumed = -amount, marker_end
    elif marker in FUTURE_MARKERS:
        consumed = marker_end
    elif marker == "from":
        _, anchor_end, anchor = find_signal_noise(s, marker_end)
        if anchor not in FROM_ANCHORS:
            return None
        consumed = anchor_end
    else:
        return None

    if unit == "day":
        return truncate_day(add_calendar(now, days=amount)), consumed
    if unit == "week":
        return truncate_week(add_calendar(now, days=7 * amount)), consumed
    if unit == "month":
        return truncate_month(add_calendar(now, months=amount)), consumed
    return truncate_year(add_calendar(now, years=amount)), consumed


def _color_month(s: str, start: int, end: int, word: str, now: datetime, direction: Direction) -> RuleMatch:
    if word not in COLOR_YEAR_OFFSETS:
        return None
    _, month_end, month_word = find_signal_noise(s, end)
    if month_word not in MONTH_NAMES:
        return None
    # Futures contracts name upcoming months, so the direction preference does not apply.
    upcoming = next_specific_month(now, MONTH_NAMES[month_word])
    return truncate_month(add_calendar(upcoming.start, years=COLOR_YEAR_OFFSETS[word])), month_end


def _weekday(s: str, start: int, end: int, word: str, now: datetime, direction: Direction) -> RuleMatch:
    if word not in WEEKDAY_NAMES:
        return None
    return nearest_weekday(now, WEEKDAY_NAMES[word], direction), end


def _strict_timestamp(s: str, start: int, end: int, word: str, now: datetime, direction: Direction) -> RuleMatch:
    token = s[start:end]
    if not STRICT_TIMESTAMP_PATTERN.fullmatch(token):
        return None
    try:
        instant = isoparse(token)
    except ValueError as exc:
        logger.warning("Timestamp %r has a valid shape but is not a valid instant: %s", token, exc)
        raise InvalidTimestampError(
            f"invalid timestamp {token!r}: {exc}", details={"text": token}
        ) from exc
    return Range(instant, timedelta(seconds=1)), end


def _generic_date(s: str, start: int, end: int, word: str, now: datetime, direction: Direction) -> RuleMatch:
    words = accumulate_date_words(s, start)
    if words is None or words.end == start:
        return None
    found = infer_range(words.date, now, direction, s[start:words.end].lower())
    if found is None:
        logger.debug("Date words %r (%s) are not specific enough", s[start:words.end], words.kinds)
        return None
    return found, words.end


IMPLICIT_RULES: Tuple[Rule, ...] = (
    _keyword_day,
    _relative_period,
    _quantity,
    _color_month,
    _weekday,
    _strict_timestamp,
    _generic_date,
)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def match_implicit_range(s: str, start: int, now: datetime, direction: Direction) -> Tuple[Range, int, int]:
    """Match an implicit range at the first word at or after ``start``.

    Returns:
        ``(range, match_start, match_end)`` offsets into ``s``

    Raises:
        NoRangeFoundError: No rule matched
        InvalidTimestampError: A strict timestamp token failed validation
    """
    word_start, word_end, word = find_signal_noise(s, start)
    if word_start == len(s):
        raise NoRangeFoundError(details={"position": start})

    for rule in IMPLICIT_RULES:
        try:
            found = rule(s, word_start, word_end, word, now, direction)
        except (OverflowError, ValueError) as exc:
            if isinstance(exc, InvalidTimestampError):
                raise
            # Calendar arithmetic past year 9999 or before year 1.
            logger.debug("Rule %s left the supported calendar for %r: %s", rule.__name__, word, exc)
            continue
        if found is not None:
            found_range, match_end = found
            logger.debug("Rule %s matched %r", rule.__name__, s[word_start:match_end])
            return found_range, word_start, match_end

    raise NoRangeFoundError(details={"position": word_start, "word": word})


def parse_implicit_range(text: str, now: datetime, direction: Direction) -> Tuple[Range, str]:
    """Parse an implicit range at the beginning of ``text``.

    Leading noise is skipped and is not part of the returned matched text.

    Returns:
        ``(range, matched_text)``
    """
    found, start, end = match_implicit_range(text, 0, now, direction)
    return found, text[start:end]
