"""Application configuration using pydantic-settings for 12-factor app compliance."""

from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    api_prefix: str = Field(default="/api/v1")
    # NoDecode lets CORS_ORIGINS be a comma separated string
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default=["http://localhost", "http://127.0.0.1"],
        description="Origins allowed to call the API from a browser",
    )

    # Scan limits
    max_pages_per_request: int = Field(
        default=5000, description="Maximum crawl records accepted per API request"
    )

    # Observability
    metrics_endpoint: str = Field(default="/metrics")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {list(LOG_LEVELS)}")
        return v.upper()


# Global settings instance
settings = Settings()
