"""CastAssignment entity — links a cast to a guest, or marks a guest's presence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from nightbase.domain.value_objects.enums import CastStatus

P = TypeVar("P")


@dataclass(frozen=True)
class CastAssignment(Generic[P]):
    """One row of a session's assignment list.

    When ``cast_id == guest_id`` the record is the guest's own presence entry
    and ``profile`` is the guest's profile. Otherwise it assigns a cast to the
    guest and ``profile`` belongs to the cast.
    """

    id: str
    cast_id: str
    guest_id: str | None
    status: str
    profile: P | None = None

    def is_guest_entry(self) -> bool:
        return self.cast_id == self.guest_id

    def is_serving(self) -> bool:
        return not self.is_guest_entry() and self.status == CastStatus.SERVING
