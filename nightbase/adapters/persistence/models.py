"""SQLAlchemy ORM models — maps to PostgreSQL tables."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Identity, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nightbase.adapters.persistence.database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ProfileModel(Base):
    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    display_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="guest")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    __table_args__ = (Index("idx_profiles_role", "role"),)


class TableModel(Base):
    __tablename__ = "tables"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    sessions: Mapped[list["TableSessionModel"]] = relationship(back_populates="table")


class TableSessionModel(Base):
    __tablename__ = "table_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    table_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("tables.id", ondelete="SET NULL"), nullable=True
    )
    guest_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="active")
    start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    table: Mapped["TableModel | None"] = relationship(back_populates="sessions")
    cast_assignments: Mapped[list["CastAssignmentModel"]] = relationship(
        back_populates="session",
        order_by="[CastAssignmentModel.created_at, CastAssignmentModel.seq]",
        cascade="all, delete-orphan",
    )

    __table_args__ = (Index("idx_table_sessions_status", "status"),)


class CastAssignmentModel(Base):
    __tablename__ = "cast_assignments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    # Insertion order; breaks ties between rows sharing a created_at
    seq: Mapped[int] = mapped_column(Integer, Identity(), nullable=False, unique=True)
    table_session_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("table_sessions.id", ondelete="CASCADE"), nullable=False
    )
    cast_id: Mapped[str] = mapped_column(String(36), ForeignKey("profiles.id"), nullable=False)
    guest_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("profiles.id"), nullable=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="waiting")
    start_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    end_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, server_default=func.now()
    )

    session: Mapped["TableSessionModel"] = relationship(back_populates="cast_assignments")
    cast_profile: Mapped["ProfileModel"] = relationship(foreign_keys="CastAssignmentModel.cast_id")

    __table_args__ = (
        Index("idx_cast_assignments_session", "table_session_id"),
        Index("idx_cast_assignments_guest", "guest_id"),
    )
