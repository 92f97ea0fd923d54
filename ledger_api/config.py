"""
Application configuration using Pydantic Settings.

All configuration is loaded from environment variables, with an optional .env file
as a fallback. Every field has a default, so the service starts with an empty
environment and a local SQLite file.

Pydantic Settings automatically:
  1. Reads from environment variables (highest priority)
  2. Falls back to .env file values
  3. Uses defaults defined here (lowest priority)

Usage:
    from ledger_api.config import settings
    print(settings.SESSION_COOKIE_MAX_AGE)
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the Session Ledger API."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # --- Application ---
    APP_NAME: str = "Session Ledger API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # --- Database ---
    # Any async SQLAlchemy URL works (e.g. postgresql+asyncpg://...)
    DATABASE_URL: str = "sqlite+aiosqlite:///./ledger.db"

    # --- Session cookie ---
    SESSION_COOKIE_NAME: str = "sessionId"
    SESSION_COOKIE_PATH: str = "/"
    SESSION_COOKIE_MAX_AGE: int = 60 * 60 * 24 * 7  # 7 days

    # --- Routing ---
    TRANSACTIONS_PREFIX: str = "/transactions"

    # --- CORS ---
    # Cookies only travel cross-origin when the origin is listed explicitly
    ALLOWED_ORIGINS: list[str] = ["http://localhost:3000"]

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False


# Singleton: import this instance everywhere instead of creating new Settings()
settings = Settings()
