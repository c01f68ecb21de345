# tests/test_health.py
from http import HTTPStatus

from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.main import create_app


def test_health_endpoint_ok(client):
    """
    /health responds with 200 OK and the expected JSON shape and types.
    """
    response = client.get("/health")

    assert response.status_code == HTTPStatus.OK
    data = response.json()

    assert data["status"] == "ok"
    assert isinstance(data["app_name"], str)
    assert isinstance(data["environment"], str)
    assert data["meetings_loaded"] == 0
    assert "timestamp_utc" in data


def test_health_counts_meetings_in_session(client, meeting_session, sample_import):
    meeting_session.replace_from_import(sample_import)

    response = client.get("/health")

    assert response.json()["meetings_loaded"] == 3


def test_health_endpoint_respects_app_name_env(monkeypatch):
    """
    APP_NAME from the environment is propagated into the /health response
    once settings are reloaded.
    """
    monkeypatch.setenv("APP_NAME", "Calendar Test App")
    get_settings.cache_clear()
    try:
        with TestClient(create_app()) as test_client:
            response = test_client.get("/health")
    finally:
        get_settings.cache_clear()

    assert response.status_code == HTTPStatus.OK
    assert response.json()["app_name"] == "Calendar Test App"
