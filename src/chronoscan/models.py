"""Value types shared by every part of the scanner.

- ``Direction``: past/future preference for under-specified phrases
- ``Range``: half-open time interval ``[start, start + duration)``
- ``LocatedRange``: a ``Range`` plus where it was found in the source text

Instants are plain ``datetime`` objects. Aware datetimes are compared and
measured in absolute time, so a day that contains a DST transition has a
duration of 23 or 25 hours.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict

from dateutil.relativedelta import relativedelta


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Direction(Enum):
    """Which way to resolve phrases that could be in the past or the future.

    "December" on 2022-09-29 is December 2022 for FUTURE and December 2021
    for PAST.
    """

    FUTURE = "future"
    PAST = "past"


# ---------------------------------------------------------------------------
# Instant arithmetic
# ---------------------------------------------------------------------------


def shift_instant(t: datetime, delta: timedelta) -> datetime:
    """Move ``t`` by an absolute amount of time, keeping its zone."""
    if t.tzinfo is None:
        return t + delta
    return (t.astimezone(timezone.utc) + delta).astimezone(t.tzinfo)


def elapsed_between(start: datetime, end: datetime) -> timedelta:
    """Absolute time elapsed from ``start`` to ``end``."""
    if start.tzinfo is None or end.tzinfo is None:
        return end - start
    return end.astimezone(timezone.utc) - start.astimezone(timezone.utc)


# ---------------------------------------------------------------------------
# Core Data Structures
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class Range:
    """A time range as a half-open interval.

    Two ranges are equal when their starts denote the same instant and their
    durations match, whatever zone the starts are expressed in.
    """

    start: datetime
    duration: timedelta

    def __post_init__(self) -> None:
        if self.duration < timedelta(0):
            raise ValueError(f"Range duration must not be negative, got {self.duration}")

    @classmethod
    def from_times(cls, start: datetime, end: datetime) -> "Range":
        """Build the range that starts at ``start`` and ends (exclusive) at ``end``."""
        return cls(start, elapsed_between(start, end))

    @property
    def end(self) -> datetime:
        """When the range ends, exclusive."""
        return shift_instant(self.start, self.duration)

    def end_inclusive_day(self) -> datetime:
        """Beginning of the last day of the range.

        Steps back one calendar day from ``end``, so a 23 or 25 hour final
        day still yields its midnight. The range is assumed to be at least a
        day long.
        """
        return self.end - relativedelta(days=1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Range):
            return NotImplemented
        return self.start == other.start and self.duration == other.duration

    def __hash__(self) -> int:
        return hash((self.start, self.duration))

    def __str__(self) -> str:
        return f"{{start: {self.start.isoformat()}, duration: {self.duration}}}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "duration_seconds": self.duration.total_seconds(),
        }


@dataclass(frozen=True)
class LocatedRange:
    """A range together with the text it came from.

    ``pos`` is the offset of ``text`` within the scanned string, so
    ``source[pos:pos + len(text)] == text``.
    """

    range: Range
    pos: int
    text: str

    @property
    def span_end(self) -> int:
        return self.pos + len(self.text)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "text": self.text,
            "span_start": self.pos,
            "span_end": self.span_end,
            "range": self.range.to_dict(),
        }
