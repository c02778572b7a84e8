"""Explicit ranges: two implicit ranges joined by a connector word.

``from A to B`` requires every part to be present. Without ``from``, a single
implicit range ``A`` is enough and a following ``to B`` only extends it when
``B`` parses.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Tuple

from chronoscan.exceptions import (
    IncomparableRangeError,
    NoConnectorFoundError,
    NoRangeEndFoundError,
    NoRangeFoundError,
    NoRangeStartFoundError,
    ReversedRangeError,
)
from chronoscan.implicit import match_implicit_range
from chronoscan.lexicon import CONNECTOR_WORDS
from chronoscan.models import Direction, Range
from chronoscan.scanner import find_signal_noise

logger = logging.getLogger(__name__)


def _span(first: Range, last: Range) -> Optional[Range]:
    """The range from the start of ``first`` to the end of ``last``, if that is not empty.

    Raises:
        TypeError: One range is naive and the other zone-aware
    """
    if last.end <= first.start:
        return None
    return Range.from_times(first.start, last.end)


def match_range(s: str, start: int, now: datetime, direction: Direction) -> Tuple[Range, int, int]:
    """Match an explicit or implicit range at the first word at or after ``start``.

    Returns:
        ``(range, match_start, match_end)`` offsets into ``s``

    Raises:
        NoRangeFoundError: Nothing parseable at the position
        NoRangeStartFoundError: ``from`` was not followed by a range
        NoConnectorFoundError: ``from A`` was not followed by to/until/til/through
        NoRangeEndFoundError: The connector was not followed by a range
        ReversedRangeError: ``from A to B`` where B ends before A starts
        IncomparableRangeError: ``from A to B`` mixing naive and zone-aware halves
    """
    first_start, first_end, first = find_signal_noise(s, start)

    if first == "from":
        try:
            opening, opening_start, opening_end = match_implicit_range(s, first_end, now, direction)
        except NoRangeFoundError as exc:
            raise NoRangeStartFoundError(details={"position": first_end}) from exc
        _, connector_end, connector = find_signal_noise(s, opening_end)
        if connector not in CONNECTOR_WORDS:
            raise NoConnectorFoundError(s[opening_start:opening_end], connector)
        try:
            closing, _, closing_end = match_implicit_range(s, connector_end, now, direction)
        except NoRangeFoundError as exc:
            raise NoRangeEndFoundError(details={"position": connector_end}) from exc
        try:
            merged = _span(opening, closing)
        except TypeError as exc:
            raise IncomparableRangeError(
                details={"text": s[first_start:closing_end], "reason": str(exc)}
            ) from exc
        if merged is None:
            raise ReversedRangeError(details={"text": s[first_start:closing_end]})
        return merged, first_start, closing_end

    found, found_start, found_end = match_implicit_range(s, start, now, direction)
    _, connector_end, connector = find_signal_noise(s, found_end)
    if connector not in CONNECTOR_WORDS:
        return found, found_start, found_end
    try:
        closing, _, closing_end = match_implicit_range(s, connector_end, now, direction)
    except NoRangeFoundError:
        logger.debug("No range after %r; keeping %r alone", connector, s[found_start:found_end])
        return found, found_start, found_end
    try:
        merged = _span(found, closing)
    except TypeError:
        logger.debug(
            "Cannot order %r against %r; keeping the first alone",
            s[found_start:found_end],
            s[connector_end:closing_end],
        )
        merged = None
    if merged is None:
        return found, found_start, found_end
    return merged, found_start, closing_end


def parse_range(text: str, now: datetime, direction: Direction) -> Tuple[Range, str]:
    """Parse a date range at the beginning of ``text``.

    Handles "last week", "from 3 feb 2022 to 6 oct 2022", "today until next
    month" and everything else the implicit grammar accepts. In ambiguous cases
    like "December", ``direction`` picks the past or future instance.

    Args:
        text: Text that starts with the range; leading noise is skipped
        now: Reference instant for relative expressions
        direction: Past/future preference

    Returns:
        ``(range, matched_text)`` where ``matched_text`` is the consumed source

    Raises:
        RangeParseError: Any of its subclasses when no range is recognized
        InvalidTimestampError: A strict timestamp token failed validation
    """
    found, start, end = match_range(text, 0, now, direction)
    return found, text[start:end]
