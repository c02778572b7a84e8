"""Word tables used by the grammar.

All keys are lower case. The tables are module constants and are never
mutated after import.
"""

from __future__ import annotations

import re
from typing import Optional

# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

NUMBER_WORDS = {
    "a": 1,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

# ASCII only: str.isdigit() also accepts superscripts and other scripts
DIGITS_PATTERN = re.compile(r"[0-9]+")

# Fits a signed 64-bit integer
MAX_DIGITS = 18

ORDINAL_SUFFIXES = ("st", "nd", "rd", "th")

# ---------------------------------------------------------------------------
# Calendar names
# ---------------------------------------------------------------------------

MONTH_NAMES = {
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "may": 5,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

# Python numbering: Monday is 0
WEEKDAY_NAMES = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

# Futures-market year colors: http://www.jdawiseman.com/papers/trivia/futures.html
COLOR_YEAR_OFFSETS = {
    "white": 0,
    "red": 1,
    "green": 2,
    "blue": 3,
    "gold": 4,
    "purple": 5,
    "orange": 6,
    "pink": 7,
    "silver": 8,
    "copper": 9,
}

# ---------------------------------------------------------------------------
# Keywords
# ---------------------------------------------------------------------------

RELATIVE_DAY_OFFSETS = {
    "yesterday": -1,
    "today": 0,
    "tomorrow": 1,
}

RELATIVE_PERIOD_OFFSETS = {
    "last": -1,
    "this": 0,
    "next": 1,
}

QUANTITY_UNITS = {
    "day": "day",
    "days": "day",
    "week": "week",
    "weeks": "week",
    "month": "month",
    "months": "month",
    "year": "year",
    "years": "year",
}

CONNECTOR_WORDS = frozenset({"to", "until", "til", "through"})

ERA_SUFFIXES = ("ad", "ce")

# "N days ago" subtracts; "hence" and "from now|today" add
PAST_MARKERS = frozenset({"ago"})
FUTURE_MARKERS = frozenset({"hence"})
FROM_ANCHORS = frozenset({"now", "today"})


def parse_digits(word: str) -> Optional[int]:
    """Integer value of an all-ASCII-digit word, else None.

    Words longer than ``MAX_DIGITS`` are not numbers.
    """
    if len(word) <= MAX_DIGITS and DIGITS_PATTERN.fullmatch(word):
        return int(word)
    return None


def parse_quantity(word: str) -> Optional[int]:
    """Integer value of a spelled-out number or digit string, else None."""
    if word in NUMBER_WORDS:
        return NUMBER_WORDS[word]
    return parse_digits(word)
