"""Typed settings for the ``RangeExtractor`` facade.

The module-level parsing functions never read settings; they take ``now``
and ``direction`` as arguments. Settings only supply defaults for the facade.

Environment variables:
- CHRONOSCAN_DEFAULT_DIRECTION: ``future`` or ``past``
- CHRONOSCAN_TIMEZONE: IANA zone name (``Europe/Stockholm``) or ``UTC``
"""

from __future__ import annotations

import os
from datetime import tzinfo
from typing import Optional

from dateutil import tz
from pydantic import BaseModel, Field, ValidationError, field_validator

from chronoscan.exceptions import ConfigurationError
from chronoscan.models import Direction

DIRECTION_ENV = "CHRONOSCAN_DEFAULT_DIRECTION"
TIMEZONE_ENV = "CHRONOSCAN_TIMEZONE"


class ScannerSettings(BaseModel):
    """Defaults used when a caller does not pass ``now`` or ``direction``.

    Example:
        >>> settings = ScannerSettings(default_direction=Direction.PAST, timezone="Europe/Oslo")
    """

    default_direction: Direction = Field(
        Direction.FUTURE, description="How to resolve phrases like 'December'"
    )
    timezone: str = Field("UTC", description="Zone of the default reference instant")

    @field_validator("timezone")
    def validate_timezone(cls, value: str) -> str:
        if not value.strip() or tz.gettz(value) is None:
            raise ValueError(f"unknown time zone: {value!r}")
        return value

    @property
    def tzinfo(self) -> tzinfo:
        return tz.gettz(self.timezone)

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "ScannerSettings":
        """Load settings from environment variables.

        Raises:
            ConfigurationError: A variable is set to an invalid value
        """
        env = os.environ if environ is None else environ
        overrides = {}
        if direction := env.get(DIRECTION_ENV):
            overrides["default_direction"] = direction.strip().lower()
        if zone := env.get(TIMEZONE_ENV):
            overrides["timezone"] = zone.strip()
        try:
            return cls(**overrides)
        except ValidationError as exc:
            raise ConfigurationError(
                f"invalid chronoscan settings in environment: {exc}",
                details={key: env.get(key) for key in (DIRECTION_ENV, TIMEZONE_ENV)},
            ) from exc
