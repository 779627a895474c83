# boutique/core/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Env vars (.env):
      - DATABASE_URL (SQLAlchemy URL; SQLite file by default, Postgres in prod)

    Optional:
      - API_PREFIX (e.g. "/api"; routes are mounted at the root by default)
      - DATABASE_ECHO (log every SQL statement)
      - CORS_ORIGINS (JSON list, e.g. '["http://localhost:5173"]')
      - LOG_LEVEL
    """

    PROJECT_NAME: str = "Baddies Boutique API"
    API_PREFIX: str = ""

    DATABASE_URL: str = "sqlite:///./boutique.db"
    DATABASE_ECHO: bool = False

    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Settings are read from the environment and .env once per process."""
    return Settings()
