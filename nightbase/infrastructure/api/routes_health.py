"""Health check endpoint — database reachability and floor occupancy."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from nightbase.adapters.persistence.database import get_session
from nightbase.adapters.persistence.models import TableSessionModel
from nightbase.config import settings
from nightbase.domain.value_objects.enums import TableSessionStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    """Report whether the floor board can be served right now."""
    open_sessions: int | None = None
    try:
        open_sessions = (
            await session.execute(
                select(func.count(TableSessionModel.id)).where(
                    TableSessionModel.status != TableSessionStatus.COMPLETED.value
                )
            )
        ).scalar() or 0
        db_status = "connected"
    except (SQLAlchemyError, OSError) as e:
        logger.warning("Health check: database unavailable: %s", e)
        db_status = f"error: {e}"

    return {
        "status": "ok" if open_sessions is not None else "degraded",
        "database": db_status,
        "open_sessions": open_sessions,
        "display_timezone": settings.display_timezone,
    }
