from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from app.core.config import Settings
from app.main import create_app
from tests.fakes import FakeNWS


def test_health_makes_no_upstream_calls(client: TestClient, fake_nws: FakeNWS) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert fake_nws.requests == []


def test_index_describes_service(client: TestClient, fake_nws: FakeNWS) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {
        "name": "Weather API",
        "endpoints": ["/weather?lat=X&lon=Y", "/health"],
        "temp_ranges": {"cold": "≤60.7°F", "moderate": "60.8-89.4°F", "hot": "≥89.5°F"},
    }
    assert fake_nws.requests == []


def test_unknown_path_is_error_payload(client: TestClient) -> None:
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json()["error"] == "Not found"


def test_app_name_comes_from_settings() -> None:
    app = create_app(Settings(_env_file=None, app_name="Gateway Under Test"))

    assert TestClient(app).get("/").json()["name"] == "Gateway Under Test"


def test_settings_are_read_only(settings: Settings) -> None:
    with pytest.raises(ValidationError):
        settings.http_timeout_seconds = 1.0  # type: ignore[misc]


def test_settings_defaults() -> None:
    s = Settings(_env_file=None)

    assert s.http_timeout_seconds == 10.0
    assert s.nws_base_url == "https://api.weather.gov"
    assert s.nws_user_agent


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("NWS_USER_AGENT", "Custom/2.0 (ops@example.com)")

    s = Settings(_env_file=None)

    assert s.http_timeout_seconds == 3.5
    assert s.nws_user_agent == "Custom/2.0 (ops@example.com)"
