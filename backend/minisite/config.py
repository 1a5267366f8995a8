"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - app_env is the single production/development toggle
    - debug is True only in development (production never leaks internals)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Settings passed explicitly into the app factory and handlers (Depends), never read ad hoc
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Runtime mode
    app_env: Literal["production", "development"] = "production"

    @field_validator("app_env", mode="before")
    @classmethod
    def normalize_app_env(cls, v: str) -> str:
        """Accept common shorthands (prod, dev) and any casing."""
        if isinstance(v, str):
            v = v.strip().lower()
            return {"prod": "production", "dev": "development"}.get(v, v)
        return v

    # Site
    site_title: str = "Minisite"
    server_software: str = "uvicorn"

    # Session cookie
    session_cookie_name: str = "minisite_session"
    session_cookie_secure: bool = False
    session_ttl_seconds: int = 7200
    session_max_entries: int = 10_000

    # Server (python -m minisite)
    host: str = "127.0.0.1"
    port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def debug(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
