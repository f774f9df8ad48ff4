"""Greeting response schema."""

from pydantic import BaseModel


class GreetingResponse(BaseModel):
    """Body of ``GET /``.

    ``timestamp`` is the epoch-millisecond clock reading taken when the
    request was handled.
    """

    message: str
    version: str
    timestamp: int
