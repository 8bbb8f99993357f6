"""Tests for the HTTP control surface."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from battlemap.app import create_app, create_asgi_app, sio
from battlemap.config import Settings
from battlemap.models import TimelineFrame


@pytest.fixture
def roster_file(tmp_path: Path) -> Path:
    """Write a two-entity roster to disk."""
    path: Path = tmp_path / "roster.json"
    path.write_text(json.dumps({
        "entities": [
            {"id": "unit", "display_name": "Unit", "color": "#000000", "path": [[0, 0], [0, 10]]},
            {"id": "post", "display_name": "Post", "color": "#ffffff", "path": [[1, 1]]},
        ]
    }))
    return path


@pytest.fixture
def settings(roster_file: Path) -> Settings:
    return Settings(_env_file=None, CLOCK_AUTOSTART=False, ROSTER_PATH=str(roster_file))


@pytest.fixture
def frames() -> list[TimelineFrame]:
    return []


@pytest.fixture
def client(settings: Settings, frames: list[TimelineFrame]) -> Iterator[TestClient]:
    """Start the app with the clock stopped and record broadcast frames."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        async def record(frame: TimelineFrame) -> None:
            frames.append(frame)

        app.state.frame_sink = record
        yield test_client


def test_initial_frame(client: TestClient) -> None:
    """Ensure the first frame shows everything at the start of the loop."""
    body: dict = client.get("/api/timeline/frame").json()
    assert body["time"] == 0.0
    assert body["playing"] is True
    assert body["play_label"] == "Pause"
    assert [entity["entity_id"] for entity in body["entities"]] == ["unit", "post"]
    assert body["entities"][0]["point"] == [0.0, 0.0]


def test_scrub_to_midpoint(client: TestClient, frames: list[TimelineFrame]) -> None:
    """Ensure scrubbing to 0.5 puts the unit halfway along its path."""
    response = client.post("/api/timeline/scrub", json={"value": 0.5})
    assert response.status_code == 200
    entity: dict = response.json()["entities"][0]
    assert entity["point"] == pytest.approx([0.0, 5.0])
    assert len(frames) == 1
    assert frames[0].time == 0.5


@pytest.mark.parametrize("value", [-0.1, 1.5])
def test_scrub_out_of_range_rejected(client: TestClient, value: float) -> None:
    """Ensure the slider bounds are enforced at the request boundary."""
    response = client.post("/api/timeline/scrub", json={"value": value})
    assert response.status_code == 422
    assert client.get("/api/timeline/frame").json()["time"] == 0.0


def test_toggle_play_returns_consistent_label(client: TestClient) -> None:
    """Ensure the label in the response matches the new playing flag."""
    paused: dict = client.post("/api/timeline/play/toggle").json()
    assert (paused["playing"], paused["play_label"]) == (False, "Play")
    resumed: dict = client.post("/api/timeline/play/toggle").json()
    assert (resumed["playing"], resumed["play_label"]) == (True, "Pause")


def test_manual_tick(client: TestClient) -> None:
    """Ensure a tick advances while playing and not while paused."""
    assert client.post("/api/timeline/tick").json()["time"] == pytest.approx(0.01)
    client.post("/api/timeline/play/toggle")
    assert client.post("/api/timeline/tick").json()["time"] == pytest.approx(0.01)


def test_speed_changes(client: TestClient) -> None:
    """Ensure faster and slower double and halve within the bounds."""
    assert client.post("/api/timeline/speed", json={"direction": "faster"}).json()["speed"] == pytest.approx(0.02)
    for _ in range(5):
        body: dict = client.post("/api/timeline/speed", json={"direction": "faster"}).json()
    assert body["speed"] == 0.08
    for _ in range(10):
        body = client.post("/api/timeline/speed", json={"direction": "slower"}).json()
    assert body["speed"] == 0.0025


def test_unknown_speed_direction_rejected(client: TestClient) -> None:
    """Ensure only faster and slower are accepted."""
    response = client.post("/api/timeline/speed", json={"direction": "warp"})
    assert response.status_code == 422


def test_toggle_visibility(client: TestClient) -> None:
    """Ensure hidden entities leave the frame but stay in the legend."""
    body: dict = client.post("/api/entities/unit/visibility/toggle").json()
    assert [entity["entity_id"] for entity in body["entities"]] == ["post"]
    assert [(entry["entity_id"], entry["is_visible"]) for entry in body["legend"]] == [
        ("unit", False),
        ("post", True),
    ]
    body = client.post("/api/entities/unit/visibility/toggle").json()
    assert [entity["entity_id"] for entity in body["entities"]] == ["unit", "post"]


def test_toggle_unknown_entity_is_noop(client: TestClient) -> None:
    """Ensure an unknown id answers with the unchanged frame."""
    before: dict = client.get("/api/timeline/frame").json()
    response = client.post("/api/entities/ghost/visibility/toggle")
    assert response.status_code == 200
    assert response.json() == before


def test_list_and_get_entities(client: TestClient) -> None:
    """Ensure the roster is served with full paths."""
    entities: list = client.get("/api/entities/").json()
    assert [entity["id"] for entity in entities] == ["unit", "post"]
    assert entities[0]["path"] == [[0.0, 0.0], [0.0, 10.0]]
    assert client.get("/api/entities/post").json()["display_name"] == "Post"
    assert client.get("/api/entities/ghost").status_code == 404


def test_map_view(client: TestClient) -> None:
    """Ensure the renderer gets the configured view."""
    body: dict = client.get("/api/map/view").json()
    assert body["center"] == [43.195, 12.09]
    assert body["zoom"] == 13
    assert "opentopomap" in body["tile_url"]


def test_health_reports_stopped_clock(client: TestClient) -> None:
    """Ensure health reflects that autostart was disabled."""
    body: dict = client.get("/health").json()
    assert body["status"] == "healthy"
    assert body["clock_running"] is False


def test_asgi_app_serves_api(settings: Settings) -> None:
    """Ensure the Socket.IO wrapper forwards lifespan and HTTP to the API."""
    with TestClient(create_asgi_app(settings)) as test_client:
        assert test_client.get("/api/timeline/frame").status_code == 200
        assert test_client.get("/").json()["name"] == "Battlemap API"


def test_failing_broadcast_still_reports_applied_change(client: TestClient) -> None:
    """Ensure a broken broadcast neither fails the request nor hides the new state."""
    async def broken(frame: TimelineFrame) -> None:
        raise RuntimeError("socket layer down")

    client.app.state.frame_sink = broken

    response = client.post("/api/timeline/play/toggle")
    assert response.status_code == 200
    assert response.json()["playing"] is False
    assert client.get("/api/timeline/frame").json()["playing"] is False

    response = client.post("/api/entities/unit/visibility/toggle")
    assert response.status_code == 200
    assert [entity["entity_id"] for entity in response.json()["entities"]] == ["post"]


def test_connect_pushes_current_frame(settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure a newly connected map view receives the current frame."""
    emitted: list[tuple[str, dict, str | None]] = []

    async def record_emit(event: str, data: dict | None = None, to: str | None = None, **kwargs) -> None:
        emitted.append((event, data, to))

    with TestClient(create_asgi_app(settings)) as test_client:
        test_client.post("/api/timeline/scrub", json={"value": 0.5})
        monkeypatch.setattr(sio, "emit", record_emit)
        connect = sio.handlers["/"]["connect"]
        asyncio.run(connect("client-sid-1234", {}))

    assert len(emitted) == 1
    event, data, to = emitted[0]
    assert (event, to) == ("frame", "client-sid-1234")
    assert data["time"] == 0.5
    assert data["entities"][0]["point"] == pytest.approx([0.0, 5.0])


def test_lifespan_starts_and_stops_clock(roster_file: Path) -> None:
    """Ensure autostart runs the clock while serving and stops it on shutdown."""
    settings = Settings(
        _env_file=None,
        CLOCK_AUTOSTART=True,
        TICK_INTERVAL_MS=10,
        ROSTER_PATH=str(roster_file),
    )
    app = create_app(settings)
    with TestClient(app) as test_client:
        assert test_client.get("/health").json()["clock_running"] is True
        assert app.state.clock.is_running is True
    assert app.state.clock.is_running is False
