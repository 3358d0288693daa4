"""
Shared fixtures: a pinned reference date and a client that uses it.
"""

import pytest
from fastapi.testclient import TestClient

from agecalc.main import app, get_reference_date
from agecalc.models import CalendarDate


@pytest.fixture
def reference_date() -> CalendarDate:
    return CalendarDate(year=2024, month=5, day=15)


@pytest.fixture
def client(reference_date: CalendarDate):
    app.dependency_overrides[get_reference_date] = lambda: reference_date
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
