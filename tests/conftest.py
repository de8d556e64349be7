"""Pytest fixtures for Stars API tests."""

from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from stars_api.app.core.config import Settings
from stars_api.app.core.db import StarStore
from stars_api.app.main import create_app
from stars_api.app.services.star_service import StarService


@pytest.fixture
def test_settings():
    """Settings pointing at a fresh in-memory database."""
    return replace(Settings(), database_url=":memory:", strict_not_found=False)


@pytest.fixture
def store():
    """An open in-memory star store, closed after the test."""
    with StarStore(":memory:") as star_store:
        yield star_store


@pytest.fixture
def service(store):
    return StarService(store)


@pytest.fixture
def app(test_settings):
    return create_app(test_settings)


@pytest.fixture
def client(app):
    """Test client with the application started, so the store is open."""
    with TestClient(app) as test_client:
        yield test_client
