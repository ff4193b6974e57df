"""
Configuration Management
========================

This module centralizes all configuration using pydantic-settings.
Values are read from environment variables (or a .env file) and validated
once at startup.

Example .env:
    API_PORT=9000
    LOG_LEVEL=DEBUG
    CORS_ORIGINS=http://localhost:3000,https://admin.example.com
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults for development.
    In production, override via environment variables or .env file.
    """

    # =========================================================================
    # Application
    # =========================================================================
    app_name: str = Field(
        default="User Registry API",
        description="Title shown in the generated API documentation"
    )

    # =========================================================================
    # API Configuration
    # =========================================================================
    api_host: str = Field(
        default="0.0.0.0",
        description="Host to bind the API server"
    )

    api_port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    api_prefix: str = Field(
        default="",
        description="Path prefix for the user routes (empty = mounted at root)"
    )

    debug_mode: bool = Field(
        default=False,
        description="Enable auto-reload for development"
    )

    # Comma-separated; "*" allows every origin
    cors_origins: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated)"
    )

    # =========================================================================
    # Logging Configuration
    # =========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            raise ValueError("api_prefix must be empty or start with '/'")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS into a list.

        Example: "http://a.com, http://b.com" -> ["http://a.com", "http://b.com"]
        """
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
