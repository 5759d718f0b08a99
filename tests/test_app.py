"""Tests for application assembly: landing page, static files, CORS and error handlers."""

from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.config import settings
from exercise_tracker_api.app.core.errors import NotFoundError, StorageError
from exercise_tracker_api.app.main import create_app


def test_landing_page(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert 'action="/api/users"' in response.text


def test_static_assets_served_from_public_dir(client):
    response = client.get("/style.css")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/css")


def test_cors_allows_any_origin(client):
    response = client.get("/api/users", headers={"Origin": "https://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"


def test_unhandled_tracker_errors_are_plain_text(db_path, tmp_path, monkeypatch):
    # Without static files mounted at "/" the routes below are reachable.
    monkeypatch.setattr(settings, "public_dir", str(tmp_path / "no-such-dir"))
    app = create_app()

    @app.get("/boom")
    async def boom():
        raise StorageError("disk on fire")

    @app.get("/missing")
    async def missing():
        raise NotFoundError("Nothing here")

    with TestClient(app) as client:
        response = client.get("/boom")
        assert response.status_code == 500
        assert response.text == "Internal Server Error"
        assert response.headers["content-type"].startswith("text/plain")

        response = client.get("/missing")
        assert response.status_code == 404
        assert response.text == "Nothing here"
