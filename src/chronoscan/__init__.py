"""Find dates and date ranges in free-form English text.

chronoscan recognizes phrases such as "last week", "two days hence",
"red october" or "from 3 feb 2022 to 6 oct 2022" without a format string and
turns each into a half-open ``Range`` anchored to a reference instant:

    from datetime import datetime, timezone
    from chronoscan import Direction, parse_range, replace_all_ranges

    now = datetime(2022, 9, 29, tzinfo=timezone.utc)
    found, matched = parse_range("last year", now, Direction.PAST)
    replace_all_ranges("due next week", now, Direction.FUTURE, lambda src, r: str(r.start.date()))
"""

from chronoscan.models import (
    Direction,
    Range,
    LocatedRange,
)

from chronoscan.exceptions import (
    ChronoscanError,
    RangeParseError,
    NoRangeFoundError,
    NoRangeStartFoundError,
    NoConnectorFoundError,
    NoRangeEndFoundError,
    ReversedRangeError,
    IncomparableRangeError,
    InvalidTimestampError,
    ConfigurationError,
)

from chronoscan.implicit import parse_implicit_range
from chronoscan.explicit import parse_range
from chronoscan.replace import find_all_ranges, replace_all_ranges

from chronoscan.config import ScannerSettings
from chronoscan.extractor import RangeExtractor

__all__ = [
    # Models
    "Direction",
    "Range",
    "LocatedRange",
    # Errors
    "ChronoscanError",
    "RangeParseError",
    "NoRangeFoundError",
    "NoRangeStartFoundError",
    "NoConnectorFoundError",
    "NoRangeEndFoundError",
    "ReversedRangeError",
    "IncomparableRangeError",
    "InvalidTimestampError",
    "ConfigurationError",
    # Parsing
    "parse_implicit_range",
    "parse_range",
    "find_all_ranges",
    "replace_all_ranges",
    # Configuration
    "ScannerSettings",
    "RangeExtractor",
]
