"""
Configuration management for PropMatch.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from importlib.resources import files
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Data files shipped inside the package
RESOURCES_DIR = Path(str(files("propmatch") / "resources"))


class MatchingSettings(BaseSettings):
    """Matching engine configuration."""

    model_config = SettingsConfigDict(env_prefix="MATCH_")

    min_score: int = Field(default=60, ge=0, le=100)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
    # File logging is off unless LOG_FILE_PATH is set
    file_path: Path | None = None
    rotation: str = "10 MB"
    retention: str = "30 days"
    console_output: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept lowercase level names from the environment."""
        return v.upper() if isinstance(v, str) else v


class AppSettings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    name: str = "PropMatch"
    version: str = "0.1.0"
    description: str = "Client and property inventory matcher for real-estate agents"
    debug: bool = False

    # Environment
    environment: Literal["development", "production", "testing"] = "development"

    # Snapshot of clients, properties and follow-ups used by the CLI
    data_file: Path = RESOURCES_DIR / "sample_data.json"

    # Nested settings
    matching: MatchingSettings = Field(default_factory=MatchingSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Global settings instance (singleton pattern)
_settings: AppSettings | None = None


def get_settings() -> AppSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = AppSettings()
    return _settings


def reload_settings() -> AppSettings:
    """Force reload settings from environment."""
    global _settings
    _settings = AppSettings()
    return _settings
