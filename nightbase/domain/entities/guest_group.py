"""GuestGroup — one guest with the casts currently serving them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

P = TypeVar("P")


@dataclass(frozen=True)
class GuestGroup(Generic[P]):
    guest: P | None
    serving_staff: tuple[P | None, ...] = ()

    @property
    def is_only(self) -> bool:
        """True when nobody is serving the guest (shown as an "only" badge)."""
        return not self.serving_staff
