from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from suggest_skills.errors import MissingCredentialError


def test_health_routes_report_live_mode(client) -> None:
    for path in ("/", "/api/health"):
        r = client.get(path)
        assert r.status_code == 200
        body = r.json()
        assert body["ok"] is True
        assert body["service"] == "suggest-skills"
        assert body["hasApiKey"] is True
        assert body["mockAI"] is False
        assert body["model"] == "gemini-1.5-flash"
        assert isinstance(body["port"], int)


def test_health_reports_mock_fallback_without_key(app_factory) -> None:
    with TestClient(app_factory(client=None, gemini_api_key=None, credential_policy="mock")) as c:
        body = c.get("/api/health").json()
        assert body["hasApiKey"] is False
        assert body["mockAI"] is True

        r = c.post("/api/suggest-skills", json={"title": "Backend Developer"})
        assert r.status_code == 200
        assert r.json()[0] == "Node.js"


def test_strict_policy_without_key_fails_startup(app_factory) -> None:
    app = app_factory(client=None, gemini_api_key=None, credential_policy="strict")
    with pytest.raises(MissingCredentialError):
        with TestClient(app):
            pass


def test_unhandled_error_is_json_500(app_factory) -> None:
    app = app_factory(client=None, mock_ai=True)

    @app.get("/boom")
    def boom() -> None:
        raise KeyError("boom")

    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/boom")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal Server Error"}
