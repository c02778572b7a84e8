"""Turn an accumulated ``PartialDate`` into a concrete ``Range``.

Decision table, most specific first:

    year  month  day   result
    ----  -----  ---   ------
    set   set    set   that calendar day
    set   set    -     that calendar month
    set   -      -     that calendar year, only if the source ends in "ad"/"ce"
    -     set    set   that day in the nearest such month in ``direction``
    -     set    -     the nearest such month in ``direction``

Anything else (including a bare year like "1999") gives no range.
"""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Optional

from chronoscan.accumulator import PartialDate
from chronoscan.lexicon import ERA_SUFFIXES
from chronoscan.models import Direction, Range
from chronoscan.periods import nearest_month, truncate_day, truncate_month, truncate_year

logger = logging.getLogger(__name__)


def _calendar_date(year: int, month: int, day: int, zone: Optional[tzinfo]) -> Optional[datetime]:
    try:
        return datetime(year, month, day, tzinfo=zone)
    except ValueError:
        # "February 30", "31/4/2014"
        logger.debug("No such calendar date: %04d-%02d-%02d", year, month, day)
        return None


def infer_range(date: PartialDate, now: datetime, direction: Direction, source: str) -> Optional[Range]:
    """Resolve ``date`` against ``now``.

    Args:
        date: Fields accumulated from the source words
        now: Reference instant; its zone is used unless the text named one
        direction: Past/future preference for dates without a year
        source: Lower-cased source text of the date, checked for an era suffix

    Returns:
        The inferred range, or None if the fields are not enough.
    """
    zone = date.zone if date.zone is not None else now.tzinfo
    year, month, day = date.year, date.month, date.day_of_month

    if year is not None and month is not None:
        start = _calendar_date(year, month, day or 1, zone)
        if start is None:
            return None
        return truncate_day(start) if day is not None else truncate_month(start)

    if year is not None and month is None and day is None:
        if not source.endswith(ERA_SUFFIXES):
            return None
        return truncate_year(datetime(year, 1, 1, tzinfo=zone))

    if year is None and month is not None:
        anchor = nearest_month(now, month, direction).start
        start = _calendar_date(anchor.year, month, day or 1, zone)
        if start is None:
            return None
        return truncate_day(start) if day is not None else truncate_month(start)

    return None
