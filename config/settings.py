from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # SWAPI (the original swapi.co host is gone, swapi.dev serves the same API)
    swapi_people_url: str = "https://swapi.dev/api/people/"

    # HTTP timeout in seconds; None waits indefinitely
    http_timeout: Optional[float] = None

    # Logging
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
