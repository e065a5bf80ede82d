"""Initial schema — profiles, tables, table sessions, cast assignments.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Profiles (guests and casts)
    op.create_table(
        "profiles",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("display_name", sa.String(200), nullable=True),
        sa.Column("avatar_url", sa.String(500), nullable=True),
        sa.Column("role", sa.String(20), nullable=False, server_default="guest"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index("idx_profiles_role", "profiles", ["role"])

    # Tables
    op.create_table(
        "tables",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
    )

    # Table sessions
    op.create_table(
        "table_sessions",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column(
            "table_id",
            sa.String(36),
            sa.ForeignKey("tables.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("guest_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("status", sa.String(20), nullable=False, server_default="active"),
        sa.Column(
            "start_time",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("idx_table_sessions_status", "table_sessions", ["status"])

    # Cast assignments (cast_id == guest_id marks the guest's own entry)
    op.create_table(
        "cast_assignments",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("seq", sa.Integer, sa.Identity(), nullable=False, unique=True),
        sa.Column(
            "table_session_id",
            sa.String(36),
            sa.ForeignKey("table_sessions.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("cast_id", sa.String(36), sa.ForeignKey("profiles.id"), nullable=False),
        sa.Column("guest_id", sa.String(36), sa.ForeignKey("profiles.id"), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="waiting"),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "idx_cast_assignments_session", "cast_assignments", ["table_session_id"]
    )
    op.create_index("idx_cast_assignments_guest", "cast_assignments", ["guest_id"])


def downgrade() -> None:
    op.drop_table("cast_assignments")
    op.drop_table("table_sessions")
    op.drop_table("tables")
    op.drop_table("profiles")
