"""GuestGroupingPolicy — groups a session's assignments by guest."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TypeVar

from nightbase.domain.entities.assignment import CastAssignment
from nightbase.domain.entities.guest_group import GuestGroup
from nightbase.domain.value_objects.enums import CastStatus

P = TypeVar("P")


def group_guests_by_casts(
    assignments: Iterable[CastAssignment[P]],
) -> list[GuestGroup[P]]:
    """Pure function: build one group per guest with the casts serving them.

    Rules:
      1. A guest is present iff it has a self-assignment (cast_id == guest_id).
         Groups follow the order of those records; a repeated self-assignment
         for the same guest is skipped (first wins).
      2. A cast record (cast_id != guest_id) contributes its profile to its
         guest's group only when status == "serving", in input order.
      3. Cast records whose guest never appears as a self-assignment are
         dropped.

    Profiles are passed through untouched. Never raises.
    """
    records = list(assignments)

    serving: dict[str | None, list[P | None]] = {}
    for a in records:
        if a.is_serving():
            serving.setdefault(a.guest_id, []).append(a.profile)

    groups: list[GuestGroup[P]] = []
    seen: set[str | None] = set()
    for a in records:
        if not a.is_guest_entry() or a.guest_id in seen:
            continue
        seen.add(a.guest_id)
        groups.append(
            GuestGroup(
                guest=a.profile,
                serving_staff=tuple(serving.get(a.guest_id, ())),
            )
        )
    return groups


def casts_for_guest(
    assignments: Iterable[CastAssignment[P]],
    guest_id: str | None,
) -> list[CastAssignment[P]]:
    """All cast records (not the guest's own entry) attached to *guest_id*."""
    return [
        a for a in assignments
        if a.guest_id == guest_id and not a.is_guest_entry()
    ]


def casts_with_status(
    assignments: Iterable[CastAssignment[P]],
    *statuses: str,
) -> list[CastAssignment[P]]:
    return [a for a in assignments if a.status in statuses]


def waiting_casts(
    assignments: Sequence[CastAssignment[P]],
    guest_id: str | None,
) -> list[CastAssignment[P]]:
    return casts_with_status(casts_for_guest(assignments, guest_id), CastStatus.WAITING)
