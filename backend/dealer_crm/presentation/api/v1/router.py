"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from dealer_crm.presentation.api.v1.endpoints.health import router as health_router
from dealer_crm.presentation.api.v1.endpoints.clients import router as clients_router
from dealer_crm.presentation.api.v1.endpoints.follow_ups import router as follow_ups_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(clients_router)
router.include_router(follow_ups_router)
