"""Application settings using Pydantic BaseSettings."""

import os
import re

from pydantic_settings import BaseSettings, SettingsConfigDict


def get_async_database_url(url: str | None = None) -> str:
    """Get database URL converted for asyncpg driver."""
    if url is None:
        url = os.environ.get("DATABASE_URL", "") or settings.database_url
    # Convert postgres:// to postgresql+asyncpg:// for SQLAlchemy async
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://") and "+asyncpg" not in url:
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    # asyncpg doesn't support sslmode, it uses ssl parameter
    if "sslmode=" in url:
        url = re.sub(r'[?&]sslmode=[^&]*', '', url)
        url = url.rstrip('?&')
    return url


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Postgres
    database_url: str = "postgresql+asyncpg://localhost:5432/supportdesk"

    # Redis (optional)
    redis_url: str = "redis://localhost:6379/0"
    redis_enabled: bool = False  # Disable Redis by default for dev

    # Prompt pipeline
    default_language: str = "en"
    prompt_timezone: str | None = None  # IANA name, e.g. "Asia/Jerusalem"; None = server local time
    prompt_override_cache_ttl_seconds: int = 60

    # Application
    environment: str = "development"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
