"""Word-by-word accumulation of a partial calendar date.

A generic date such as "Oct. 7, 1970 UTC+3" is read one word at a time. Each
word sets one or more fields of a ``PartialDate`` and reports a field-kind
code: ``y`` year, ``m`` month, ``d`` day of month, ``z`` zone, or the compound
``ymd``/``dmy`` for tokens like ``2014/03/31``. The merge loop stops at the
first word that does not parse, repeats a field kind already seen, or places a
day of month anywhere but first or straight after a month. The date then ends
at the last accepted word; the rejected word is left for the caller.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from datetime import timezone, tzinfo
from typing import Optional

from chronoscan.lexicon import (
    DIGITS_PATTERN,
    ERA_SUFFIXES,
    MONTH_NAMES,
    NUMBER_WORDS,
    ORDINAL_SUFFIXES,
    parse_digits,
)
from chronoscan.periods import fixed_zone
from chronoscan.scanner import find_signal_noise

logger = logging.getLogger(__name__)

YMD_PATTERN = re.compile(r"([0-9]{4})[-/]([0-9]{1,2})[-/]([0-9]{1,2})")
DMY_PATTERN = re.compile(r"([0-9]{1,2})[-/]([0-9]{1,2})[-/]([0-9]{4})")
SIGNED_DIGITS_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class PartialDate:
    """Fields gathered so far for one generic-date parse attempt."""

    year: Optional[int] = None
    month: Optional[int] = None
    day_of_month: Optional[int] = None
    zone: Optional[tzinfo] = None

    def snapshot(self) -> "PartialDate":
        return replace(self)

    def restore(self, saved: "PartialDate") -> None:
        self.year = saved.year
        self.month = saved.month
        self.day_of_month = saved.day_of_month
        self.zone = saved.zone


@dataclass(frozen=True)
class DateWords:
    """Result of running the merge loop over consecutive words."""

    date: PartialDate
    kinds: str
    end: int


def _year(word: str) -> Optional[int]:
    value = parse_digits(word) if len(word) == 4 else None
    if value is not None and 1000 <= value <= 9999:
        return value
    return None


def _valid_day(day: int) -> bool:
    return 1 <= day <= 31


def parse_day_of_month(word: str) -> Optional[int]:
    """Day of month from "seven", "7" or "7th"."""
    if word in NUMBER_WORDS:
        value = NUMBER_WORDS[word]
        return value if _valid_day(value) else None
    for suffix in ORDINAL_SUFFIXES:
        if word.endswith(suffix):
            word = word[: -len(suffix)]
    value = parse_digits(word)
    if value is not None and _valid_day(value):
        return value
    return None


def _compound(date: PartialDate, year: str, month: str, day: str) -> bool:
    y, m, d = int(year), int(month), int(day)
    if not 1 <= m <= 12 or not _valid_day(d):
        return False
    date.year, date.month, date.day_of_month = y, m, d
    return True


def _utc_offset(word: str) -> Optional[tzinfo]:
    if word == "utc":
        return timezone.utc
    if len(word) in (5, 6) and word.startswith("utc") and SIGNED_DIGITS_PATTERN.fullmatch(word[3:]):
        hours = int(word[3:])
        if -12 <= hours <= 12:
            return fixed_zone(hours)
    return None


def parse_date_word(date: PartialDate, word: str) -> Optional[str]:
    """Set the field(s) of ``date`` that ``word`` describes.

    Returns:
        The field-kind code for the word, or None if it is not a date word.
        ``date`` is only modified when a code is returned.
    """
    year = _year(word)
    if year is not None:
        date.year = year
        return "y"

    day = parse_day_of_month(word)
    if day is not None:
        date.day_of_month = day
        return "d"

    match = YMD_PATTERN.search(word)
    if match and _compound(date, match.group(1), match.group(2), match.group(3)):
        return "ymd"

    match = DMY_PATTERN.search(word)
    if match and _compound(date, match.group(3), match.group(2), match.group(1)):
        return "dmy"

    if word in MONTH_NAMES:
        date.month = MONTH_NAMES[word]
        return "m"

    zone = _utc_offset(word)
    if zone is not None:
        date.zone = zone
        return "z"

    # 1999ad, 2008ce
    if len(word) == 6 and word[4:] in ERA_SUFFIXES and DIGITS_PATTERN.fullmatch(word[:4]):
        year = int(word[:4])
        if year >= 1000:
            date.year = year
            return "y"

    return None


def accumulate_date_words(s: str, start: int) -> Optional[DateWords]:
    """Merge consecutive words of ``s`` beginning at ``start`` into one date.

    Returns None when the words begin with a bare day of month that is not
    followed by a month name. Otherwise returns the accumulated date, its kind
    code and the offset just past the last accepted word (``start`` if no word
    was accepted).
    """
    date = PartialDate()
    kinds = ""
    end_of_last_good = start
    word_start, word_end, word = find_signal_noise(s, start)
    while word_start < len(s):
        saved = date.snapshot()
        kind = parse_date_word(date, word)
        if kind is None:
            date.restore(saved)
            break
        # Repeated field kinds end the date one word early rather than failing it.
        if any(code in kinds for code in kind):
            logger.debug("Date word %r repeats a field of %r; stopping", word, kinds)
            date.restore(saved)
            break
        if kind == "d" and kinds and not kinds.endswith("m"):
            logger.debug("Day of month %r after %r; stopping", word, kinds)
            date.restore(saved)
            break
        kinds += kind
        end_of_last_good = word_end
        word_start, word_end, word = find_signal_noise(s, word_end)

    if kinds.startswith("d") and not kinds.startswith("dm"):
        # A bare day of month is never enough to pin down a date.
        return None
    return DateWords(date=date, kinds=kinds, end=end_of_last_good)
