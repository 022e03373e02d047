"""Abstract repository interface (port) for client/instrument links."""

from abc import ABC, abstractmethod

from dealer_crm.domain.entities import ClientInstrument


class ClientInstrumentRepository(ABC):
    """Port for the client-instrument relationship collection."""

    @abstractmethod
    async def get_all(self) -> list[ClientInstrument]:
        """Retrieve every client/instrument link."""
        ...
