"""Health check response schema consumed by K8s liveness/readiness probes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class HealthStatus(str, Enum):
    """Service status reported on ``/health``."""

    UP = "UP"
    DOWN = "DOWN"


class HealthResponse(BaseModel):
    """Body of ``GET /health``."""

    status: HealthStatus
    service: str
