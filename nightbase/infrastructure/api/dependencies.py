"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from nightbase.adapters.persistence.database import get_session
from nightbase.adapters.persistence.repositories import SqlTableSessionRepository
from nightbase.application.use_cases.floor_board import FloorBoardUseCase
from nightbase.application.use_cases.session_detail import SessionDetailUseCase
from nightbase.config import settings


def get_session_repo(session: AsyncSession = Depends(get_session)) -> SqlTableSessionRepository:
    return SqlTableSessionRepository(session)


def get_floor_board_uc(
    session_repo: SqlTableSessionRepository = Depends(get_session_repo),
) -> FloorBoardUseCase:
    return FloorBoardUseCase(
        session_repo=session_repo,
        visible_groups=settings.floor_board_visible_groups,
        tz=settings.display_timezone,
    )


def get_session_detail_uc(
    session_repo: SqlTableSessionRepository = Depends(get_session_repo),
) -> SessionDetailUseCase:
    return SessionDetailUseCase(session_repo=session_repo, tz=settings.display_timezone)
