"""Find and rewrite every date range in a document.

The scan moves left to right one word at a time. At each word start it asks
the range grammar for a match; on a hit it jumps past the matched text, on a
miss it skips to the end of the word. Matches therefore never overlap, and
any text that is not part of a match is reproduced exactly.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterator, List

from chronoscan.exceptions import RangeParseError
from chronoscan.explicit import match_range
from chronoscan.models import Direction, LocatedRange, Range
from chronoscan.scanner import find_next_noise, find_next_signal, is_word_start

logger = logging.getLogger(__name__)

Replacer = Callable[[str, Range], str]


def iter_ranges(text: str, now: datetime, direction: Direction) -> Iterator[LocatedRange]:
    """Yield each range found in ``text``, in order of position."""
    pos = 0
    while pos < len(text):
        word_start = find_next_signal(text, pos)
        if word_start == len(text):
            break
        if not is_word_start(text, word_start):
            pos = find_next_noise(text, word_start)
            continue
        try:
            found, start, end = match_range(text, word_start, now, direction)
        except RangeParseError as exc:
            logger.debug("No range at %d: %s", word_start, exc)
            pos = find_next_noise(text, word_start)
            continue
        yield LocatedRange(range=found, pos=start, text=text[start:end])
        pos = end


def find_all_ranges(text: str, now: datetime, direction: Direction) -> List[LocatedRange]:
    """All non-overlapping ranges in ``text`` with their positions.

    Example:
        >>> found = find_all_ranges("ship it next week", now, Direction.FUTURE)
        >>> found[0].text, found[0].pos
        ('next week', 8)
    """
    return list(iter_ranges(text, now, direction))


def replace_all_ranges(text: str, now: datetime, direction: Direction, f: Replacer) -> str:
    """Replace every date range in ``text`` with ``f(matched_text, range)``.

    Ranges include things like "this year" (Jan 1 to Dec 31 of the current
    year) and "from last year to next year". In ambiguous cases like
    "December" that could be in the past or the future, ``direction`` chooses.

    Text the grammar does not recognize is never an error; it is copied
    through unchanged. With ``f = lambda src, r: src`` the result equals
    ``text``.

    Raises:
        InvalidTimestampError: A strict timestamp token failed validation
        Exception: Whatever ``f`` raises
    """
    parts: List[str] = []
    end_of_previous = 0
    for located in iter_ranges(text, now, direction):
        parts.append(text[end_of_previous:located.pos])
        parts.append(f(located.text, located.range))
        end_of_previous = located.span_end
    parts.append(text[end_of_previous:])
    return "".join(parts)
