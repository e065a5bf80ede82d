"""SQLAlchemy repository implementations."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from nightbase.adapters.persistence.models import (
    CastAssignmentModel,
    ProfileModel,
    TableSessionModel,
)
from nightbase.application.ports.session_repo import TableSessionRepository
from nightbase.domain.entities.assignment import CastAssignment
from nightbase.domain.entities.profile import Profile
from nightbase.domain.entities.table_session import TableSession
from nightbase.domain.value_objects.enums import ProfileRole, TableSessionStatus

# ─── Mappers ─────────────────────────────────────────────────────────


def _profile_to_domain(m: ProfileModel) -> Profile:
    return Profile(
        id=m.id,
        display_name=m.display_name,
        role=ProfileRole(m.role),
        avatar_url=m.avatar_url,
    )


def _assignment_to_domain(m: CastAssignmentModel) -> CastAssignment[Profile]:
    # For a guest's own entry cast_id == guest_id, so the cast profile is the guest.
    return CastAssignment(
        id=m.id,
        cast_id=m.cast_id,
        guest_id=m.guest_id,
        status=m.status,
        profile=_profile_to_domain(m.cast_profile) if m.cast_profile else None,
    )


def _session_to_domain(m: TableSessionModel) -> TableSession:
    return TableSession(
        id=m.id,
        table_id=m.table_id,
        table_name=m.table.name if m.table else None,
        start_time=m.start_time,
        end_time=m.end_time,
        guest_count=m.guest_count,
        status=TableSessionStatus(m.status),
        assignments=[_assignment_to_domain(a) for a in m.cast_assignments],
    )


def _with_relations(stmt):
    return stmt.options(
        selectinload(TableSessionModel.table),
        selectinload(TableSessionModel.cast_assignments).selectinload(
            CastAssignmentModel.cast_profile
        ),
    )


# ─── Repositories ────────────────────────────────────────────────────


class SqlTableSessionRepository(TableSessionRepository):
    def __init__(self, session: AsyncSession):
        self._s = session

    async def get_active(self) -> list[TableSession]:
        result = await self._s.execute(
            _with_relations(select(TableSessionModel))
            .where(TableSessionModel.status != TableSessionStatus.COMPLETED.value)
            .order_by(TableSessionModel.start_time, TableSessionModel.id)
        )
        return [_session_to_domain(m) for m in result.scalars()]

    async def get_completed(self) -> list[TableSession]:
        result = await self._s.execute(
            _with_relations(select(TableSessionModel))
            .where(TableSessionModel.status == TableSessionStatus.COMPLETED.value)
            .order_by(TableSessionModel.end_time.desc().nulls_last())
        )
        return [_session_to_domain(m) for m in result.scalars()]

    async def get_by_id(self, session_id: str) -> TableSession | None:
        result = await self._s.execute(
            _with_relations(select(TableSessionModel)).where(
                TableSessionModel.id == session_id
            )
        )
        m = result.scalar_one_or_none()
        return _session_to_domain(m) if m else None
