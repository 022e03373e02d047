"""Abstract repository interface (port) for contact logs."""

from abc import ABC, abstractmethod

from dealer_crm.domain.entities import ContactLog


class ContactLogRepository(ABC):
    """Port for contact log lookups."""

    @abstractmethod
    async def get_by_client(
        self, client_id: str, *, instrument_id: str | None = None
    ) -> list[ContactLog]:
        """Contact logs for one client, optionally narrowed to one instrument."""
        ...

    @abstractmethod
    async def get_due_follow_ups(self) -> list[ContactLog]:
        """Contact logs whose follow-up is due today or overdue and not completed."""
        ...
