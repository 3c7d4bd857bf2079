"""Shared test fixtures and helpers."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from courtcheck.api.deps import get_registry, get_today
from courtcheck.main import app
from courtcheck.models.resource import Resource
from courtcheck.services.registry import ResourceRegistry

FUTURE_DATE = "2099-01-01"
TODAY = date(2026, 1, 1)


def _make_resource(resource_id: str = "R1", open_: str = "08:00", close: str = "22:00", bookings=None, **extra):
    return Resource.model_validate(
        {"id": resource_id, "open": open_, "close": close, "bookings": bookings or {}, **extra}
    )


@pytest.fixture
def make_resource():
    return _make_resource


@pytest.fixture
def court():
    """Open 08:00-22:00 with one booking 10:00-11:30 on FUTURE_DATE."""
    return _make_resource(
        "R1",
        bookings={FUTURE_DATE: [{"start": "10:00", "end": "11:30"}]},
        hourly_rate="20.00",
        peak_start="18:00",
        peak_end="22:00",
        peak_hourly_rate="30.00",
    )


@pytest.fixture
def registry(court):
    return ResourceRegistry([court, _make_resource("EMPTY", open_="09:00", close="21:00")])


@pytest.fixture
def client(registry):
    app.dependency_overrides[get_registry] = lambda: registry
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
