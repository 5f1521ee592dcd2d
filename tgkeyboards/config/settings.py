"""Configuration management using Pydantic Settings.

Features:
- Environment variable loading (``TGKEYBOARDS_`` prefix, optional ``.env``)
- Type validation
- Default values
"""

from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tgkeyboards.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Settings for the command line renderer."""

    # Rendering
    resize_keyboard: bool = Field(
        True, description="Ask clients to resize opened reply keyboards"
    )
    json_indent: int = Field(
        2,
        description="Indentation of printed JSON payloads (0 prints compact JSON)",
        ge=0,
        le=8,
    )

    # Monitoring
    log_level: str = Field("INFO", description="Logging level")

    # Development
    debug: bool = Field(False, description="Enable debug mode")

    model_config = SettingsConfigDict(
        env_prefix="TGKEYBOARDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: Any) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if str(v).upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return str(v).upper()


def load_settings(**overrides: Any) -> Settings:
    """Load settings from the environment, applying explicit overrides."""
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
