"""TableSession entity — a party seated at a table, with its assignments."""

from dataclasses import dataclass, field
from datetime import datetime

from nightbase.domain.entities.assignment import CastAssignment
from nightbase.domain.entities.profile import Profile
from nightbase.domain.value_objects.enums import TableSessionStatus


@dataclass
class TableSession:
    id: str
    table_id: str | None
    table_name: str | None
    start_time: datetime
    guest_count: int
    status: TableSessionStatus = TableSessionStatus.ACTIVE
    end_time: datetime | None = None
    assignments: list[CastAssignment[Profile]] = field(default_factory=list)

    def is_completed(self) -> bool:
        return self.status == TableSessionStatus.COMPLETED
