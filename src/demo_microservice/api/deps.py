"""Shared FastAPI dependencies for settings and the request-time clock."""

from fastapi import Request

from demo_microservice.config import Settings
from demo_microservice.services.greeting_service import Clock, epoch_millis


async def get_app_settings(request: Request) -> Settings:
    """Return the Settings instance stored on app state.

    The settings are attached to ``request.app.state.settings`` by
    ``create_app`` so tests can inject their own instance.
    """
    return request.app.state.settings


async def get_clock() -> Clock:
    """Return the epoch-millisecond clock used to stamp responses.

    Overridden in tests via ``app.dependency_overrides``.
    """
    return epoch_millis
