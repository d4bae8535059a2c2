"""Pytest configuration and fixtures for the plan client tests."""

from unittest.mock import MagicMock

import pytest

from src.services.api_client import ApiClient
from src.tests.plan_factories import FakeScheduler, make_response
from src.utils.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Give each test a fresh configuration read from a clean environment."""
    for name in ("BAKE_PLAN_ENV", "BAKE_PLAN_API_URL", "BAKE_PLAN_TIMEOUT", "BAKE_PLAN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def scheduler():
    """Provide a fake Tk scheduler."""
    return FakeScheduler()


@pytest.fixture
def http_session():
    """Provide a mock requests.Session; set .request.return_value/side_effect."""
    session = MagicMock()
    session.headers = {}
    session.request.return_value = make_response(data=None)
    return session


@pytest.fixture
def client(http_session):
    """Provide an ApiClient wired to the mock session."""
    return ApiClient("http://bakery.test", timeout=5, session=http_session)
