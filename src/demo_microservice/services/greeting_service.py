"""Greeting construction.

Builds the body of ``GET /`` from settings and a request-time clock
reading.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from demo_microservice.config import Settings
from demo_microservice.schemas.greeting import GreetingResponse

Clock = Callable[[], int]


def epoch_millis() -> int:
    """Return the current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def build_greeting(settings: Settings, now_ms: int) -> GreetingResponse:
    """Build a fresh greeting from the configured message and version."""
    return GreetingResponse(
        message=settings.greeting,
        version=settings.version,
        timestamp=now_ms,
    )
