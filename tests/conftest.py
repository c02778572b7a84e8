"""Shared fixtures for chronoscan tests.

Provides:
- A fixed reference instant (Thursday 2022-09-29 02:48:33 UTC)
- Both directions, for behaviour that must not depend on direction
"""

from datetime import datetime, timezone

import pytest

from chronoscan import Direction


@pytest.fixture
def now():
    """Reference instant used by most grammar tests. A Thursday."""
    return datetime(2022, 9, 29, 2, 48, 33, tzinfo=timezone.utc)


@pytest.fixture(params=list(Direction), ids=lambda d: d.value)
def any_direction(request):
    return request.param
