"""Floor endpoints — session board, session detail, status options."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from nightbase.application.use_cases.floor_board import FloorBoardUseCase, SessionCard
from nightbase.application.use_cases.session_detail import (
    CastEntry,
    GuestDetail,
    SessionDetailUseCase,
    SessionNotFoundError,
)
from nightbase.domain.entities.guest_group import GuestGroup
from nightbase.domain.entities.profile import Profile
from nightbase.domain.value_objects.status_option import STATUS_OPTIONS, StatusOption
from nightbase.infrastructure.api.dependencies import (
    get_floor_board_uc,
    get_session_detail_uc,
)

router = APIRouter(prefix="/floor", tags=["floor"])


@router.get("/sessions")
async def list_active_sessions(board_uc: FloorBoardUseCase = Depends(get_floor_board_uc)):
    """Cards for every table session still on the floor."""
    cards = await board_uc.execute()
    return {"total": len(cards), "sessions": [_serialize_card(c) for c in cards]}


@router.get("/sessions/completed")
async def list_completed_sessions(board_uc: FloorBoardUseCase = Depends(get_floor_board_uc)):
    cards = await board_uc.completed()
    return {"total": len(cards), "sessions": [_serialize_card(c) for c in cards]}


@router.get("/sessions/{session_id}")
async def get_session_detail(
    session_id: str,
    detail_uc: SessionDetailUseCase = Depends(get_session_detail_uc),
):
    """One session broken down per guest."""
    try:
        detail = await detail_uc.execute(session_id)
    except SessionNotFoundError:
        raise HTTPException(status_code=404, detail="Session not found")

    return {
        "session_id": detail.session_id,
        "table_name": detail.table_name,
        "start_time": detail.start_time_label,
        "guest_count": detail.guest_count,
        "status": detail.status,
        "guests": [_serialize_guest(g) for g in detail.guests],
    }


@router.get("/status-options")
async def list_status_options():
    return {"options": [_serialize_option(o) for o in STATUS_OPTIONS]}


def _serialize_profile(p: Profile | None) -> dict | None:
    if p is None:
        return None
    return {
        "id": p.id,
        "display_name": p.display_name,
        "avatar_url": p.avatar_url,
        "role": p.role.value,
    }


def _serialize_option(o: StatusOption) -> dict:
    return {"value": o.value, "label": o.label, "color": o.color, "is_status": o.is_status}


def _serialize_group(g: GuestGroup[Profile]) -> dict:
    return {
        "guest": _serialize_profile(g.guest),
        "serving_staff": [_serialize_profile(p) for p in g.serving_staff],
        "is_only": g.is_only,
    }


def _serialize_card(c: SessionCard) -> dict:
    return {
        "session_id": c.session_id,
        "table_name": c.table_name,
        "start_time": c.start_time_label,
        "guest_count": c.guest_count,
        "guest_groups": [_serialize_group(g) for g in c.guest_groups],
        "hidden_group_count": c.hidden_group_count,
        "total_groups": c.total_groups,
    }


def _serialize_cast(c: CastEntry) -> dict:
    return {
        "assignment_id": c.assignment_id,
        "cast": _serialize_profile(c.cast),
        "status": c.status,
        "option": _serialize_option(c.option),
    }


def _serialize_guest(g: GuestDetail) -> dict:
    return {
        "guest": _serialize_profile(g.guest),
        "serving_staff": [_serialize_profile(p) for p in g.serving_staff],
        "waiting": [_serialize_profile(p) for p in g.waiting],
        "is_only": g.is_only,
        "casts": [_serialize_cast(c) for c in g.casts],
    }
