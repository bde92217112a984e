# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to storage selection, fetch tuning and logging config

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="WIKIQUIZ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Storage Configuration
    storage_backend: Literal["database", "memory"] = Field(
        default="database",
        description="Storage implementation selected at process start; memory lasts one process (embedding, tests)",
    )
    database_url: str = Field(
        default="sqlite+aiosqlite:///./wikiquiz.db", description="Database URL for async SQLite operations"
    )

    # Fetch Configuration
    request_timeout: float = Field(default=20.0, description="Timeout in seconds for article fetches")
    user_agent: str = Field(
        default="AI Wiki Quiz Generator (educational project)",
        description="User-Agent header sent to Wikipedia",
    )
    fetch_max_attempts: int = Field(
        default=3, ge=1, description="Attempts for a fetch that fails at the transport level"
    )

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
