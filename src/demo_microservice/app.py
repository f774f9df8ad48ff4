"""FastAPI application factory with a logging lifespan."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from demo_microservice.api.router import api_router
from demo_microservice.config import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log service identity and runtime profile on startup and shutdown."""
    settings: Settings = app.state.settings

    logger.info(
        "Service '%s' %s started -- profile: %s",
        settings.service_name,
        settings.version,
        settings.profile,
    )

    yield

    logger.info("Service '%s' shutting down", settings.service_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the app factory. Uvicorn calls it with the --factory flag:
        uvicorn demo_microservice.app:create_app --factory
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Demo Microservice",
        version=settings.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
    )
    app.state.settings = settings

    app.include_router(api_router)

    return app
