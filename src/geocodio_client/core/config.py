"""Client configuration via Pydantic Settings.

All configuration is loaded from environment variables (or a ``.env`` file)
following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GEOCODIO_BASE_URL = "https://api.geocod.io/v1.7/"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geocodio
    geocodio_api_key: str | None = Field(
        default=None,
        description="Geocodio API key",
    )
    geocodio_base_url: str = Field(
        default=GEOCODIO_BASE_URL,
        description="Base URL of the versioned Geocodio API",
    )
    geocodio_timeout: float = Field(
        default=30.0,
        description="Geocodio request timeout in seconds",
        gt=0,
    )

    @field_validator("geocodio_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            msg = "geocodio_base_url must be an http(s) URL"
            raise ValueError(msg)
        # Endpoint names are joined relative to the last path segment
        return v if v.endswith("/") else f"{v}/"

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )


def get_settings() -> Settings:
    """Create and return client settings."""
    return Settings()
