"""Fixtures shared by every app's tests."""

import pytest
from django.core.cache import cache
from pytest import MonkeyPatch


@pytest.fixture(autouse=True)
def increase_rate_limit(monkeypatch: MonkeyPatch) -> None:
    """Increase the rate limits of the public throttles to allow testing."""
    monkeypatch.setattr("common.throttling.AnonDefaultThrottle.rate", "1000/min")
    monkeypatch.setattr("common.throttling.ReservationThrottle.rate", "1000/min")
    monkeypatch.setattr("common.throttling.WaitingListThrottle.rate", "1000/min")


@pytest.fixture(autouse=True)
def clear_cache() -> None:
    """Throttle history lives in the cache, start every test with an empty one."""
    cache.clear()
