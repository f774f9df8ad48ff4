"""Pydantic response models for the demo microservice routes."""

from demo_microservice.schemas.greeting import GreetingResponse
from demo_microservice.schemas.health import HealthResponse, HealthStatus

__all__ = ["GreetingResponse", "HealthResponse", "HealthStatus"]
