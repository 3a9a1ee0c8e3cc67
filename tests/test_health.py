"""Sanity tests for the health and root endpoints."""

from fastapi.testclient import TestClient

from wardrobe_app.main import app


def test_healthcheck_reports_database(client):
    response = client.get("/healthcheck")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "wardrobe-api"
    assert body["database"] == "connected"
    assert body["timestamp"]


def test_root(client):
    assert client.get("/").json()["docs"] == "/docs"


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found", "error_code": "NOT_FOUND"}


def test_app_starts_and_runs_startup_hooks():
    # Entering the client runs the lifespan startup handlers
    with TestClient(app) as client:
        assert client.get("/healthcheck").status_code == 200
