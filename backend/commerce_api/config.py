"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: the API runs out-of-the-box on :4400
    - Loops form id is optional: without it subscribe delivery is skipped, not failed
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    app_title: str = "V1 API"
    app_version: str = "1.0.0"
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 4400

    # API (consumer side: where CommerceApiClient sends requests)
    api_base_url: str = "http://localhost:4400"
    api_key: str | None = None
    api_timeout_seconds: float = 30.0

    # Loops (newsletter provider)
    loops_base_url: str = "https://app.loops.so"
    loops_form_id: str | None = None
    loops_max_retries: int = 3
    loops_base_delay_ms: int = 500
    loops_max_delay_ms: int = 8_000
    loops_timeout_seconds: float = 10.0

    # HTTP
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("api_base_url", "loops_base_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoints are joined as base + "/api/...", so drop a trailing slash."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
