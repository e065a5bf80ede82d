"""Port interface for table session persistence."""

from abc import ABC, abstractmethod

from nightbase.domain.entities.table_session import TableSession


class TableSessionRepository(ABC):
    @abstractmethod
    async def get_active(self) -> list[TableSession]:
        """Sessions that are not completed, with their assignments loaded."""
        ...

    @abstractmethod
    async def get_completed(self) -> list[TableSession]:
        """Completed sessions, most recently ended first."""
        ...

    @abstractmethod
    async def get_by_id(self, session_id: str) -> TableSession | None:
        ...
