"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All settings come from environment variables or .env (never hardcoded at call sites)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: `python -m rates_api` works with an empty environment
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Upstream exchange-rate service
    rates_api_url: str = "https://api.exchangeratesapi.io/latest"
    rates_api_key: str | None = None

    @field_validator("rates_api_key", mode="before")
    @classmethod
    def blank_key_is_none(cls, v):
        """An empty RATES_API_KEY means no key (nothing sent upstream)."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
