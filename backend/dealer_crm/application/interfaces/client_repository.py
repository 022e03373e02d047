"""Abstract repository interface (port) for reading clients."""

from abc import ABC, abstractmethod

from dealer_crm.domain.entities import Client


class ClientRepository(ABC):
    """Port for client lookups — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_all(self) -> list[Client]:
        """Retrieve every client visible to the list view."""
        ...

    @abstractmethod
    async def get_by_id(self, client_id: str) -> Client | None:
        """Retrieve a single client, or None if it does not exist."""
        ...
