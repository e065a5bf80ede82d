"""FloorBoardUseCase — session cards for the live floor board."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from nightbase.application.ports.session_repo import TableSessionRepository
from nightbase.domain.entities.guest_group import GuestGroup
from nightbase.domain.entities.profile import Profile
from nightbase.domain.entities.table_session import TableSession
from nightbase.domain.policies.guest_grouping import group_guests_by_casts
from nightbase.domain.policies.time_format import DEFAULT_TZ, format_time
from nightbase.domain.value_objects.status_option import UNKNOWN_LABEL

logger = logging.getLogger(__name__)


@dataclass
class SessionCard:
    """What one table's card on the board shows."""

    session_id: str
    table_name: str
    start_time_label: str
    guest_count: int
    guest_groups: list[GuestGroup[Profile]]
    hidden_group_count: int
    total_groups: int


def build_session_card(
    session: TableSession,
    visible_groups: int = 3,
    tz: str = DEFAULT_TZ,
) -> SessionCard:
    groups = group_guests_by_casts(session.assignments)
    visible = groups[:visible_groups]
    return SessionCard(
        session_id=session.id,
        table_name=session.table_name or UNKNOWN_LABEL,
        start_time_label=format_time(session.start_time, tz),
        guest_count=session.guest_count,
        guest_groups=visible,
        hidden_group_count=len(groups) - len(visible),
        total_groups=len(groups),
    )


class FloorBoardUseCase:
    """Builds the floor board from the sessions currently stored."""

    def __init__(
        self,
        session_repo: TableSessionRepository,
        visible_groups: int = 3,
        tz: str = DEFAULT_TZ,
    ):
        self._sessions = session_repo
        self._visible = visible_groups
        self._tz = tz

    async def execute(self) -> list[SessionCard]:
        """Cards for every session that is not completed yet."""
        sessions = await self._sessions.get_active()
        logger.info("Floor board: %d active sessions", len(sessions))
        return [build_session_card(s, self._visible, self._tz) for s in sessions]

    async def completed(self) -> list[SessionCard]:
        sessions = await self._sessions.get_completed()
        logger.info("Floor board: %d completed sessions", len(sessions))
        return [build_session_card(s, self._visible, self._tz) for s in sessions]
