"""Tests for the floor API routes with use cases overridden."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from nightbase.application.ports.session_repo import TableSessionRepository
from nightbase.application.use_cases.floor_board import FloorBoardUseCase
from nightbase.application.use_cases.session_detail import SessionDetailUseCase
from nightbase.domain.entities.assignment import CastAssignment
from nightbase.domain.entities.profile import Profile
from nightbase.domain.entities.table_session import TableSession
from nightbase.domain.value_objects.enums import ProfileRole, TableSessionStatus
from nightbase.infrastructure.api.dependencies import (
    get_floor_board_uc,
    get_session_detail_uc,
)
from nightbase.main import create_app


class FakeSessionRepo(TableSessionRepository):
    def __init__(self, sessions):
        self.sessions = {s.id: s for s in sessions}

    async def get_active(self):
        return [s for s in self.sessions.values() if not s.is_completed()]

    async def get_completed(self):
        return [s for s in self.sessions.values() if s.is_completed()]

    async def get_by_id(self, session_id):
        return self.sessions.get(session_id)


GUEST = Profile(id="g1", display_name="田中様", role=ProfileRole.GUEST)
CAST = Profile(id="c1", display_name="あかり", role=ProfileRole.CAST, avatar_url="/a.png")


def _session(sid: str, status=TableSessionStatus.ACTIVE) -> TableSession:
    return TableSession(
        id=sid, table_id="t1", table_name="A1",
        start_time=datetime(2026, 10, 19, 11, 0, tzinfo=timezone.utc),
        guest_count=1, status=status,
        assignments=[
            CastAssignment(id="a1", cast_id="g1", guest_id="g1", status="serving", profile=GUEST),
            CastAssignment(id="a2", cast_id="c1", guest_id="g1", status="serving", profile=CAST),
        ],
    )


@pytest.fixture
def client():
    repo = FakeSessionRepo([
        _session("s1"),
        _session("s2", status=TableSessionStatus.COMPLETED),
    ])
    app = create_app()
    app.dependency_overrides[get_floor_board_uc] = lambda: FloorBoardUseCase(repo)
    app.dependency_overrides[get_session_detail_uc] = lambda: SessionDetailUseCase(repo)
    return TestClient(app)


def test_list_active_sessions(client):
    resp = client.get("/api/floor/sessions")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 1
    card = body["sessions"][0]
    assert card["session_id"] == "s1"
    assert card["start_time"] == "20:00"
    group = card["guest_groups"][0]
    assert group["guest"]["display_name"] == "田中様"
    assert group["serving_staff"][0] == {
        "id": "c1", "display_name": "あかり", "avatar_url": "/a.png", "role": "cast",
    }
    assert group["is_only"] is False


def test_list_completed_sessions(client):
    resp = client.get("/api/floor/sessions/completed")
    assert resp.status_code == 200
    assert [s["session_id"] for s in resp.json()["sessions"]] == ["s2"]


def test_session_detail(client):
    resp = client.get("/api/floor/sessions/s1")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "active"
    guest = body["guests"][0]
    assert guest["waiting"] == []
    assert guest["casts"][0]["option"]["label"] == "接客中"


def test_session_detail_not_found(client):
    resp = client.get("/api/floor/sessions/nope")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Session not found"


def test_status_options(client):
    resp = client.get("/api/floor/status-options")
    assert resp.status_code == 200
    values = [o["value"] for o in resp.json()["options"]]
    assert values[:3] == ["waiting", "serving", "ended"]
