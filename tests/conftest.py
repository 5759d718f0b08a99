"""
Shared fixtures.

Every test gets its own SQLite file so that no state leaks between
tests.  The client is entered as a context manager so that the startup
and shutdown hooks open and close the store connection.
"""

import pytest
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.config import settings
from exercise_tracker_api.app.main import app


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "tracker.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user(client):
    """A registered user as returned by ``POST /api/users``."""
    response = client.post("/api/users", json={"username": "fcc_test"})
    assert response.status_code == 200
    return response.json()
