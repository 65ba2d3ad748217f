"""Application configuration via Pydantic Settings.

All configuration is loaded from environment variables following 12-factor principles.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Geocoding
    geocoder_provider: str = Field(
        default="opencage",
        description="Geocoder provider used to resolve addresses to coordinates",
    )
    opencage_api_key: str | None = Field(
        default=None,
        description="OpenCage Geocoding API key",
    )
    geocoder_country_code: str = Field(
        default="us",
        description="ISO 3166-1 alpha-2 country code that restricts geocoding results",
    )
    geocoder_timeout: float = Field(
        default=10.0,
        description="Geocoder request timeout in seconds",
        gt=0,
    )

    @field_validator("geocoder_country_code")
    @classmethod
    def validate_geocoder_country_code(cls, v: str) -> str:
        v = v.strip().lower()
        if len(v) != 2 or not v.isalpha():
            msg = "geocoder_country_code must be a two-letter country code"
            raise ValueError(msg)
        return v

    # Elected Officials Providers
    officials_provider: str = Field(
        default="open_states",
        description="Provider used to look up officials at a coordinate",
    )
    open_states_api_key: str | None = Field(
        default=None,
        description="Open States API key for state legislator data",
    )
    open_states_timeout: float = Field(
        default=10.0,
        description="Open States request timeout in seconds",
        gt=0,
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    # CORS
    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins (must be explicitly configured)",
    )
    cors_origin_regex: str = Field(
        default="",
        description="Regex pattern for allowed CORS origins",
    )

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )

    # API
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API version prefix",
    )

    @property
    def cors_origin_list(self) -> list[str]:
        """Parse CORS origins string into a list."""
        if not self.cors_origins.strip():
            return []
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
