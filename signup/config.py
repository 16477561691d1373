"""Configuration loading for the signup registration service.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

import re
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Password policy
    password_min_length: int = Field(
        default=6,
        description="Minimum password length (inclusive)",
    )
    password_max_length: int = Field(
        default=8,
        description="Maximum password length (inclusive)",
    )
    password_pattern: str = Field(
        default=r"^[A-Za-z0-9]+$",
        description="Regular expression the whole password must match",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("password_min_length", "password_max_length")
    @classmethod
    def validate_password_length(cls, v: int) -> int:
        """Ensure password length bounds are positive."""
        if v <= 0:
            raise ValueError("password length bounds must be positive")
        return v

    @field_validator("password_pattern")
    @classmethod
    def validate_password_pattern(cls, v: str) -> str:
        """Ensure the password pattern compiles."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"password_pattern is not a valid regex: {e}") from e
        return v

    @model_validator(mode="after")
    def validate_password_bounds(self) -> "Settings":
        """Ensure the minimum length does not exceed the maximum."""
        if self.password_min_length > self.password_max_length:
            raise ValueError(
                "password_min_length must not exceed password_max_length"
            )
        return self


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
