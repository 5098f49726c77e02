from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

PACKAGED_DATA_PATH = Path(__file__).resolve().parent / "data" / "schools.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    DATA_BACKEND: str = "json"
    SCHOOLS_DATA_PATH: str = str(PACKAGED_DATA_PATH)
    CORS_ORIGINS: str = ""  # Comma-separated origins, empty = same-origin only
    LOG_LEVEL: str = "INFO"

    # Listing behaviour
    PAGE_SIZE: int = 12
    MAX_VISIBLE_PAGES: int = 5
    DEFAULT_LOCATION: str = ""  # empty = all locations

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
