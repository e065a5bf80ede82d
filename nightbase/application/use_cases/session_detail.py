"""SessionDetailUseCase — per-guest breakdown of one table session."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from nightbase.application.ports.session_repo import TableSessionRepository
from nightbase.domain.entities.assignment import CastAssignment
from nightbase.domain.entities.profile import Profile
from nightbase.domain.policies.guest_grouping import (
    casts_for_guest,
    group_guests_by_casts,
    waiting_casts,
)
from nightbase.domain.policies.time_format import DEFAULT_TZ, format_time
from nightbase.domain.value_objects.status_option import (
    UNKNOWN_LABEL,
    StatusOption,
    get_status_option,
)

logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    def __init__(self, session_id: str):
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


@dataclass
class CastEntry:
    assignment_id: str
    cast: Profile | None
    status: str
    option: StatusOption


@dataclass
class GuestDetail:
    guest: Profile | None
    serving_staff: list[Profile | None]
    waiting: list[Profile | None]
    casts: list[CastEntry] = field(default_factory=list)

    @property
    def is_only(self) -> bool:
        return not self.serving_staff


@dataclass
class SessionDetail:
    session_id: str
    table_name: str
    start_time_label: str
    guest_count: int
    status: str
    guests: list[GuestDetail]


def _cast_entry(a: CastAssignment[Profile]) -> CastEntry:
    return CastEntry(
        assignment_id=a.id,
        cast=a.profile,
        status=a.status,
        option=get_status_option(a.status),
    )


class SessionDetailUseCase:
    def __init__(self, session_repo: TableSessionRepository, tz: str = DEFAULT_TZ):
        self._sessions = session_repo
        self._tz = tz

    async def execute(self, session_id: str) -> SessionDetail:
        """Load one session and break it down per guest.

        Guests follow the grouping order; each carries serving and waiting
        casts plus every cast record with its display option.

        Raises:
            SessionNotFoundError: if no session has *session_id*.
        """
        session = await self._sessions.get_by_id(session_id)
        if session is None:
            logger.warning("Session %s not found", session_id)
            raise SessionNotFoundError(session_id)

        assignments = session.assignments
        groups = group_guests_by_casts(assignments)

        # group_guests_by_casts only exposes profiles; pair them back with guest ids
        guest_ids: list[str | None] = []
        for a in assignments:
            if a.is_guest_entry() and a.guest_id not in guest_ids:
                guest_ids.append(a.guest_id)

        guests = []
        for guest_id, group in zip(guest_ids, groups):
            guests.append(
                GuestDetail(
                    guest=group.guest,
                    serving_staff=list(group.serving_staff),
                    waiting=[a.profile for a in waiting_casts(assignments, guest_id)],
                    casts=[_cast_entry(a) for a in casts_for_guest(assignments, guest_id)],
                )
            )

        return SessionDetail(
            session_id=session.id,
            table_name=session.table_name or UNKNOWN_LABEL,
            start_time_label=format_time(session.start_time, self._tz),
            guest_count=session.guest_count,
            status=session.status.value,
            guests=guests,
        )
