"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Values come from the process environment or a local .env file
    - get_settings() is cached (lru_cache): one Settings per process
    - database_url always names an async driver
"""

import platform
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ASYNC_POSTGRES_SCHEME = "postgresql+asyncpg://"


def normalize_database_url(url: str) -> str:
    """Hosted Postgres URLs (postgres://, postgresql://) → asyncpg driver."""
    for scheme in ("postgresql://", "postgres://"):
        if url.startswith(scheme):
            return ASYNC_POSTGRES_SCHEME + url[len(scheme):]
    return url


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Storage
    database_url: str = f"{ASYNC_POSTGRES_SCHEME}smartsales:smartsales@db:5432/smartsales"
    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Reported by GET /api/v1/app
    plugin_name: str = "AI Smart Sales"
    plugin_version: str = "1.0.0"
    site_url: str = "http://localhost:8000"
    site_name: str = "SmartSales"
    site_language: str = "en-US"

    # HTTP
    cors_origins: list[str] = ["http://localhost:5173"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v):
        return normalize_database_url(v) if isinstance(v, str) else v

    def site_metadata(self) -> dict[str, str]:
        """Environment facts merged into the store profile."""
        return {
            "plugin_name": self.plugin_name,
            "plugin_version": self.plugin_version,
            "site_url": self.site_url,
            "site_name": self.site_name,
            "site_language": self.site_language,
            "python_version": platform.python_version(),
            "platform": platform.system(),
        }


@lru_cache
def get_settings() -> Settings:
    return Settings()
