"""Repository adapters backed by the CRM data API."""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from dealer_crm.application.interfaces import (
    ClientInstrumentRepository,
    ClientRepository,
    ContactLogRepository,
)
from dealer_crm.domain.entities import Client, ClientInstrument, ContactLog
from dealer_crm.infrastructure.crm_api.crm_api_client import CrmApiClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _parse_rows(
    rows: list[dict[str, Any]],
    factory: Callable[[dict[str, Any]], T],
    entity_type: str,
) -> list[T]:
    """Convert rows to entities, skipping (and logging) malformed ones."""
    entities: list[T] = []
    for row in rows:
        try:
            entities.append(factory(row))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping malformed %s row %r: %s", entity_type, row.get("id"), exc)
    return entities


class ApiClientRepository(ClientRepository):
    """Clients from ``GET /clients?all=true``."""

    def __init__(self, api: CrmApiClient):
        self._api = api

    async def get_all(self) -> list[Client]:
        rows = await self._api.get_rows("clients", params={"all": "true"})
        return _parse_rows(rows, Client.from_dict, "client")

    async def get_by_id(self, client_id: str) -> Client | None:
        # The clients endpoint has no id lookup; scan the full list.
        for client in await self.get_all():
            if client.id == client_id:
                return client
        return None


class ApiClientInstrumentRepository(ClientInstrumentRepository):
    """Client/instrument links from ``GET /connections``."""

    def __init__(self, api: CrmApiClient):
        self._api = api

    async def get_all(self) -> list[ClientInstrument]:
        rows = await self._api.get_rows("connections")
        return _parse_rows(rows, ClientInstrument.from_dict, "connection")


class ApiContactLogRepository(ContactLogRepository):
    """Contact logs from ``GET /contacts``."""

    def __init__(self, api: CrmApiClient):
        self._api = api

    async def get_by_client(
        self, client_id: str, *, instrument_id: str | None = None
    ) -> list[ContactLog]:
        params = {"clientId": client_id}
        if instrument_id:
            params["instrumentId"] = instrument_id
        rows = await self._api.get_rows("contacts", params=params)
        return _parse_rows(rows, ContactLog.from_dict, "contact log")

    async def get_due_follow_ups(self) -> list[ContactLog]:
        rows = await self._api.get_rows("contacts", params={"followUpDue": "true"})
        return _parse_rows(rows, ContactLog.from_dict, "contact log")
