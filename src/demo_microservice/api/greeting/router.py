"""Greeting router serving the service root."""

import logging

from fastapi import APIRouter, Depends

from demo_microservice.api.deps import get_app_settings, get_clock
from demo_microservice.config import Settings
from demo_microservice.schemas.greeting import GreetingResponse
from demo_microservice.services.greeting_service import Clock, build_greeting

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=GreetingResponse)
async def greeting(
    settings: Settings = Depends(get_app_settings),
    clock: Clock = Depends(get_clock),
) -> GreetingResponse:
    """Return the configured greeting and version stamped with the current time."""
    response = build_greeting(settings, clock())
    logger.debug("Greeting served at %d", response.timestamp)
    return response
