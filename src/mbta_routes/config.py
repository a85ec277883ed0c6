"""Configuration using Pydantic Settings.

Every setting can be overridden through an environment variable with the
``MBTA_`` prefix, e.g. ``MBTA_API_KEY`` or ``MBTA_TIMEOUT=60``.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import RAIL_ROUTE_TYPES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """MBTA route search settings."""

    model_config = SettingsConfigDict(env_prefix="MBTA_", extra="ignore")

    api_base_url: str = "https://api-v3.mbta.com"
    api_key: str | None = None
    timeout: int = Field(30, description="Request timeout in seconds")
    route_types: list[int] = Field(
        default_factory=lambda: [int(t) for t in RAIL_ROUTE_TYPES]
    )
    retry_attempts: int = Field(3, ge=1)
    retry_wait_seconds: float = Field(1.0, ge=0)
    log_level: str = "WARNING"

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize the log level name."""
        normalized = v.strip().upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(LOG_LEVELS)}"
            )
        return normalized

    def masked_api_key(self) -> str:
        """Return the API key with all but the last four characters hidden."""
        if not self.api_key:
            return "Not configured"
        if len(self.api_key) <= 4:
            return "*" * len(self.api_key)
        return "*" * (len(self.api_key) - 4) + self.api_key[-4:]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()


def reset_settings() -> None:
    """Clear the settings cache so the next call re-reads the environment."""
    get_settings.cache_clear()
