"""Error definitions for chronoscan.

Two families of errors live here:

- ``RangeParseError`` and its subclasses are grammar misses. They are
  recoverable: the text at that position simply is not a date, and callers
  scanning a whole document move on to the next word.
- ``InvalidTimestampError`` and ``ConfigurationError`` are hard failures and
  propagate to the top-level caller.

Usage:
    from chronoscan.exceptions import RangeParseError

    try:
        found, matched = parse_range(text, now, Direction.PAST)
    except RangeParseError as e:
        print(e.to_dict())
"""

from __future__ import annotations

from typing import Any, Dict, Optional


# =============================================================================
# Base Error
# =============================================================================


class ChronoscanError(Exception):
    """Base exception for all chronoscan errors.

    Attributes:
        code: Error code for categorization
        recoverable: Whether scanning can continue past this error
        details: Additional error details for debugging
    """

    code: str = "CHRONOSCAN_ERROR"
    default_message: str = "An unexpected error occurred"
    recoverable: bool = False

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "recoverable": self.recoverable,
            "details": self.details,
        }


# =============================================================================
# Grammar Errors
# =============================================================================


class RangeParseError(ChronoscanError, ValueError):
    """Base error for text that does not parse as a date range."""

    code = "RANGE_PARSE_ERROR"
    default_message = "Could not parse a date range"
    recoverable = True


class NoRangeFoundError(RangeParseError):
    """No grammar rule matched at the start of the text."""

    code = "NO_RANGE_FOUND"
    default_message = "no range found"


class NoRangeStartFoundError(RangeParseError):
    """Nothing parseable followed the word ``from``."""

    code = "NO_RANGE_START_FOUND"
    default_message = "no start of range found just after `from`"


class NoConnectorFoundError(RangeParseError):
    """The start of a ``from A to B`` range was not followed by a connector.

    Attributes:
        parsed_start: Source text of the start range that did parse
        word_after_start: The word found where a connector was expected
    """

    code = "NO_CONNECTOR_FOUND"

    def __init__(self, parsed_start: str, word_after_start: str) -> None:
        self.parsed_start = parsed_start
        self.word_after_start = word_after_start
        super().__init__(
            f"expected 'to|until|til|through' after {parsed_start!r}, got {word_after_start!r}",
            details={"parsed_start": parsed_start, "word_after_start": word_after_start},
        )


class NoRangeEndFoundError(RangeParseError):
    """Nothing parseable followed the connector word."""

    code = "NO_RANGE_END_FOUND"
    default_message = "no end of range found just after `to` or similar"


class ReversedRangeError(RangeParseError):
    """The end of a ``from A to B`` range is not after its start."""

    code = "REVERSED_RANGE"
    default_message = "end of range is not after its start"


class IncomparableRangeError(RangeParseError):
    """The two halves of a ``from A to B`` range cannot be ordered.

    Happens when one half carries a zone written in the text and the other
    inherits a naive reference instant.
    """

    code = "INCOMPARABLE_RANGE"
    default_message = "start and end of range mix naive and zone-aware times"


# =============================================================================
# Hard Failures
# =============================================================================


class InvalidTimestampError(ChronoscanError, ValueError):
    """A token has the strict timestamp shape but is not a valid instant.

    Example: ``2022-13-45T10:00:00Z``. This is raised, not skipped.
    """

    code = "INVALID_TIMESTAMP"
    default_message = "Malformed timestamp"


class ConfigurationError(ChronoscanError):
    """Scanner settings could not be loaded or validated."""

    code = "CONFIGURATION_ERROR"
    default_message = "Invalid chronoscan configuration"
