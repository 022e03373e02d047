"""Health check endpoint — always available, optionally checks the CRM data API."""

import logging

from fastapi import APIRouter, Depends, Query

from dealer_crm.config import get_settings
from dealer_crm.domain.exceptions import CrmApiError
from dealer_crm.infrastructure.crm_api import CrmApiClient
from dealer_crm.infrastructure.dependencies import get_crm_api_health_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    check_upstream: bool = Query(False, description="Also call the CRM data API"),
    api: CrmApiClient = Depends(get_crm_api_health_client),
) -> dict:
    """Returns the current application health status."""
    settings = get_settings()
    body = {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
    }
    if check_upstream:
        try:
            await api.get_json("clients", params={"limit": 1})
            body["upstream"] = "reachable"
        except CrmApiError as e:
            logger.warning("Health check could not reach the CRM API: %s", e)
            body["status"] = "degraded"
            body["upstream"] = "unreachable"
    return body
