"""Process entry point: ``python -m demo_microservice`` or ``demo-microservice``."""

import uvicorn

from demo_microservice.config import get_settings


def main() -> None:
    """Serve the app factory on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "demo_microservice.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
