"""
Shared fixtures: mocked resource services and a TestClient built with them.
No MongoDB needed; lifespan is not entered (client used without a context manager).
"""
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from housing_api.main import create_app


@pytest.fixture
def unit_service():
    return MagicMock(name="unit_service")


@pytest.fixture
def user_service():
    return MagicMock(name="user_service")


@pytest.fixture
def client(unit_service, user_service):
    """TestClient over an app wired with mocked services."""
    return TestClient(create_app(unit_service=unit_service, user_service=user_service))
