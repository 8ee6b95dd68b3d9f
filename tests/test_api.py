"""Tests for the chronoline FastAPI application.

- `GET /health` reports status, environment and package version.
- `POST /timeline` returns the widget payload plus the year span.
- Library errors map to HTTP 400 with the error class name.
"""

from __future__ import annotations

from typing import Final

from fastapi.testclient import TestClient

from chronoline import __version__ as PKG_VERSION
from chronoline.api.app import create_app

ALLOWED_ENVS: Final[set[str]] = {"dev", "test", "prod"}


def _client() -> TestClient:
    return TestClient(create_app())


def test_health_endpoint_contract() -> None:
    resp = _client().get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["environment"] in ALLOWED_ENVS
    assert data["version"] == PKG_VERSION


def test_build_timeline_from_events() -> None:
    resp = _client().post(
        "/timeline",
        json={"events": [{"start": "1850", "title": "a"}, {"start": "1900/1975", "title": "b"}]},
    )
    assert resp.status_code == 200, resp.text
    data = resp.json()
    assert data["firstYear"] == 1850
    assert data["lastYear"] == 1975
    assert data["empty"] is False
    events = data["timeline"]["events"]
    assert data["timeline"]["dateTimeFormat"] == "iso8601"
    assert events[0]["durationEvent"] is True
    assert events[1]["end"] == "1975-01-01T00:00:00Z"


def test_build_timeline_from_sources() -> None:
    resp = _client().post(
        "/timeline",
        json={
            "sources": [
                {"uri": "http://example.org/a", "properties": {"when": "10-09-1976"}},
                {"uri": "http://example.org/b", "properties": {}},
            ],
            "properties": {"start": "when"},
        },
    )
    assert resp.status_code == 200, resp.text
    events = resp.json()["timeline"]["events"]
    assert len(events) == 1
    assert events[0]["start"] == "1976-09-10T00:00:00Z"
    assert events[0]["link"] == "http://example.org/a"


def test_library_errors_map_to_400() -> None:
    client = _client()

    resp = client.post("/timeline", json={"events": [{"title": "no start"}]})
    assert resp.status_code == 400
    assert resp.json()["error"] == "IncompleteRecordError"

    resp = client.post("/timeline", json={})
    assert resp.status_code == 400
    assert resp.json()["error"] == "ConfigurationError"

    resp = client.post("/timeline", json={"events": [{"start": "soon-ish", "title": "x"}]})
    assert resp.status_code == 400
    assert resp.json()["error"] == "DateFormatError"
