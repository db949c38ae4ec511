"""Application-wide configuration (pydantic-settings singleton)."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.domain.enums import Environment


class Settings(BaseSettings):
    """Typed, validated settings loaded from environment / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ──────────────────────────────
    app_name: str = "Array Data Processor API"
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = False
    log_level: str = "INFO"

    # ── Server ───────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 3001
    max_content_length: int = Field(default=10 * 1024 * 1024, gt=0)

    # ── CORS ─────────────────────────────────────
    cors_origins: str = "*"

    # ── Client ───────────────────────────────────
    api_base_url: str = "http://localhost:3001"
    client_timeout: float = Field(default=5.0, gt=0)

    # ── Demo identity (attached to /process responses) ──
    user_id: str = "demo_user_29082025"
    email: str = "demo@example.com"
    roll_number: str = "12345"

    @field_validator("environment", mode="before")
    @classmethod
    def parse_environment(cls, value):
        if isinstance(value, str):
            return Environment.from_string(value)
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper().strip()

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    # ── Derived helpers ──────────────────────────

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def expose_error_details(self) -> bool:
        """Whether internal error text may be returned to callers."""
        return self.debug or self.is_development


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide singleton settings."""
    return Settings()


def reset_settings() -> None:
    """Clear the singleton (for testing)."""
    get_settings.cache_clear()
