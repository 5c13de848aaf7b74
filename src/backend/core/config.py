"""
Application configuration using Pydantic Settings.

All configuration is loaded from environment variables or a local .env file.
"""

from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "ElectionLedger"
    APP_ENV: str = "development"
    DEBUG: bool = False
    SECRET_KEY: str = ""  # Required - loaded from environment

    # Authentication
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30

    # Election authority
    # Principal identifier that holds full administrative control at startup.
    # Authority can later be handed over with PUT /api/v1/authority.
    ELECTION_AUTHORITY: str = ""  # Required - loaded from environment

    # CORS - stored as comma-separated string to avoid pydantic-settings JSON parsing issues
    CORS_ORIGINS: str = "http://localhost:3000"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool | None = None  # None = JSON outside development

    @field_validator("SECRET_KEY", "ELECTION_AUTHORITY")
    @classmethod
    def validate_required_values(cls, v: str, info: Any) -> str:
        """Validate that required values are set."""
        if not v or not v.strip():
            raise ValueError(f"{info.field_name} must be set in environment")
        return v.strip()

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        import json

        try:
            return json.loads(self.CORS_ORIGINS)
        except json.JSONDecodeError:
            return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def use_json_logs(self) -> bool:
        """Whether log output should be rendered as JSON lines."""
        if self.LOG_JSON is not None:
            return self.LOG_JSON
        return self.APP_ENV not in ("development", "test")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
