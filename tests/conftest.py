"""Shared fixtures for the users API tests."""

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_user_service
from app.main import app
from app.services.user_service import UserService


@pytest.fixture
def service():
    return UserService()


@pytest.fixture
def client(service):
    """TestClient whose routes all share the fresh ``service`` fixture."""
    app.dependency_overrides[get_user_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
