from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings loaded from environment variables with DEMO_ prefix."""

    # Greeting route
    greeting: str = "Hello from Microservice! New message here hihi!"
    version: str = "1.0.0"
    # Health route
    service_name: str = "demo-microservice"
    # Runtime
    profile: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    # HTTP server (probes in k8s/deployment.yaml target this port)
    host: str = "0.0.0.0"
    port: int = 8080

    model_config = SettingsConfigDict(env_prefix="DEMO_", env_file=".env")


@lru_cache
def get_settings() -> Settings:
    """Return cached service settings instance."""
    return Settings()
