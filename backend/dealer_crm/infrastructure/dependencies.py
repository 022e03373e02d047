"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

import httpx
from fastapi import Depends

from dealer_crm.application.services import ClientListService, ContactLogService
from dealer_crm.config import get_settings
from dealer_crm.infrastructure.crm_api import (
    ApiClientInstrumentRepository,
    ApiClientRepository,
    ApiContactLogRepository,
    CrmApiClient,
)


async def get_crm_api_client() -> AsyncGenerator[CrmApiClient, None]:
    """One pooled httpx client per request, closed when the request ends."""
    settings = get_settings()
    async with httpx.AsyncClient(timeout=settings.crm_api_timeout) as http_client:
        yield CrmApiClient(
            base_url=settings.crm_api_base_url,
            timeout=settings.crm_api_timeout,
            http_client=http_client,
        )


def get_crm_api_health_client() -> CrmApiClient:
    """A CrmApiClient without a pooled httpx client; a connection opens only when used."""
    settings = get_settings()
    return CrmApiClient(base_url=settings.crm_api_base_url, timeout=settings.crm_api_timeout)


async def get_client_list_service(
    api: CrmApiClient = Depends(get_crm_api_client),
) -> AsyncGenerator[ClientListService, None]:
    """Provides a ClientListService reading clients and connections from the CRM API."""
    settings = get_settings()
    yield ClientListService(
        client_repository=ApiClientRepository(api),
        instrument_repository=ApiClientInstrumentRepository(api),
        default_page_size=settings.client_page_size,
    )


async def get_contact_log_service(
    api: CrmApiClient = Depends(get_crm_api_client),
) -> AsyncGenerator[ContactLogService, None]:
    """Provides a ContactLogService reading contact logs from the CRM API."""
    yield ContactLogService(ApiContactLogRepository(api))
