"""Convenience facade over the range grammar.

``RangeExtractor`` fills in the reference instant and the direction from
``ScannerSettings`` when a call does not supply them, and counts how many
ranges it has found. Everything else is delegated to the pure functions in
``chronoscan.explicit`` and ``chronoscan.replace``.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from chronoscan.config import ScannerSettings
from chronoscan.explicit import parse_range
from chronoscan.models import Direction, LocatedRange, Range
from chronoscan.replace import Replacer, find_all_ranges, replace_all_ranges

logger = logging.getLogger(__name__)


class RangeExtractor:
    """Find date ranges in text.

    Supports:
    - Keyword days and periods (today, last week, next year)
    - Quantities (3 days ago, a month from now, two years hence)
    - Calendar dates (Oct 7 1970, 2014/03/31, 31-3-2014 UTC-8, 1999AD)
    - Month and weekday names resolved by direction (December, thursday)
    - Explicit ranges (from 3 feb 2022 to 6 oct 2022)

    Example:
        >>> extractor = RangeExtractor(ScannerSettings(default_direction=Direction.PAST))
        >>> extractor.replace("due last week", lambda src, r: r.start.date().isoformat())
    """

    def __init__(self, settings: Optional[ScannerSettings] = None):
        self.settings = settings or ScannerSettings()
        self.extracted_count = 0

    def now(self) -> datetime:
        """Current time in the configured zone."""
        return datetime.now(self.settings.tzinfo)

    def _resolve(
        self, now: Optional[datetime], direction: Optional[Direction]
    ) -> Tuple[datetime, Direction]:
        return (
            now if now is not None else self.now(),
            direction if direction is not None else self.settings.default_direction,
        )

    def parse(
        self,
        text: str,
        now: Optional[datetime] = None,
        direction: Optional[Direction] = None,
    ) -> Tuple[Range, str]:
        """Parse the range at the start of ``text``. See ``parse_range``."""
        now, direction = self._resolve(now, direction)
        result = parse_range(text, now, direction)
        self.extracted_count += 1
        return result

    def find_all(
        self,
        text: str,
        now: Optional[datetime] = None,
        direction: Optional[Direction] = None,
    ) -> List[LocatedRange]:
        """All ranges in ``text``. See ``find_all_ranges``."""
        now, direction = self._resolve(now, direction)
        found = find_all_ranges(text, now, direction)
        self.extracted_count += len(found)
        logger.debug("Found %d range(s) in %d characters", len(found), len(text))
        return found

    def replace(
        self,
        text: str,
        f: Replacer,
        now: Optional[datetime] = None,
        direction: Optional[Direction] = None,
    ) -> str:
        """Rewrite every range in ``text``. See ``replace_all_ranges``."""
        now, direction = self._resolve(now, direction)
        replaced = 0

        def counting(src: str, found: Range) -> str:
            nonlocal replaced
            replaced += 1
            return f(src, found)

        result = replace_all_ranges(text, now, direction, counting)
        self.extracted_count += replaced
        return result
