"""Tests for the HTTP surface."""

from __future__ import annotations

from fastapi.testclient import TestClient

from draftdesk.api.app import create_app
from draftdesk.config import Settings
from fakes import ScriptedBackend, make_controller, reply


def _client(backend: ScriptedBackend, settings: Settings) -> TestClient:
    return TestClient(create_app(settings=settings, controller=make_controller(backend, settings)))


def test_health(settings: Settings) -> None:
    """It should report ok."""

    client = _client(ScriptedBackend(), settings)
    assert client.get("/health").json() == {"status": "ok"}


def test_submit_select_and_page(settings: Settings) -> None:
    """It should run a turn, navigate the outline and render the page."""

    client = _client(ScriptedBackend(reply("T", "# T\nbody\n## Part")), settings)

    resp = client.post("/submit", json={"message": "topic"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["accepted"] is True
    assert body["state"]["outline"][1] == {"id": "section-2", "text": "Part", "level": 2}

    resp = client.post("/sections/section-2/select")
    assert resp.status_code == 200
    assert resp.json()["active_section_id"] == "section-2"
    assert client.post("/sections/section-1/select").status_code == 404

    page = client.get("/").text
    assert 'id="section-2"' in page
    assert "Mode B: Surgical Edit" in page


def test_submit_blank_and_failure(settings: Settings) -> None:
    """It should reject blank input and report failures without losing state."""

    client = _client(ScriptedBackend("not json"), settings)

    assert client.post("/submit", json={"message": " "}).status_code == 422

    resp = client.post("/submit", json={"message": "topic"})
    assert resp.status_code == 200
    state = resp.json()["state"]
    assert state["error"] == "Connection Interrupted."
    assert state["is_processing"] is False
    assert state["output"] is None
    assert "Connection Interrupted." in client.get("/").text


def test_reset(settings: Settings) -> None:
    """It should clear the document."""

    client = _client(ScriptedBackend(reply("T", "# T")), settings)
    client.post("/submit", json={"message": "topic"})

    state = client.post("/reset").json()
    assert state["output"] is None
    assert state["mode_label"] == "Mode A: Genesis"
    assert client.get("/state").json()["outline"] == []
