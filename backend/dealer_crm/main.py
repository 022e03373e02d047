"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealer_crm.config import get_settings
from dealer_crm.infrastructure.logging.log_config import setup_logging
from dealer_crm.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and report the upstream API."""
    settings = get_settings()
    setup_logging(settings)
    logger.info(
        "%s %s (%s) reading from CRM API at %s",
        settings.app_title,
        settings.app_version,
        settings.app_env,
        settings.crm_api_base_url,
    )
    yield
    logger.info("%s shutting down", settings.app_title)


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "dealer_crm.main:app",
        host="0.0.0.0",
        port=8030,
        reload=True,
    )
