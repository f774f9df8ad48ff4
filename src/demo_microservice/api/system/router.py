"""System router providing the health check used by K8s probes."""

import logging

from fastapi import APIRouter, Depends

from demo_microservice.api.deps import get_app_settings
from demo_microservice.config import Settings
from demo_microservice.schemas.health import HealthResponse, HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """Health check endpoint for liveness and readiness probes.

    Always answers 200 ``UP`` while the process can serve requests. An
    unresponsive or crashed process is caught by the probe timeout.
    """
    logger.debug("Health check for %s", settings.service_name)
    return HealthResponse(status=HealthStatus.UP, service=settings.service_name)
