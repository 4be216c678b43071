"""Configuration management for axtract using pydantic-settings.

Settings are read from environment variables (``AXTRACT_`` prefix) and an
optional ``.env`` file.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AxtractSettings(BaseSettings):
    """Main configuration settings for axtract.

    Examples:
        AXTRACT_MAX_DEPTH=80
        AXTRACT_MESSAGING_TIMEOUT=0.5
        AXTRACT_DEBUG_MODE=true
    """

    model_config = SettingsConfigDict(
        env_prefix="AXTRACT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Traversal
    max_depth: int = Field(
        default=50, ge=1, description="Maximum depth the tree walker descends to"
    )
    messaging_timeout: float = Field(
        default=1.0,
        gt=0.0,
        description="Per-query timeout in seconds applied by host bindings that support it",
    )

    # Logging
    debug_mode: bool = Field(default=False, description="Enable debug logging")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level used when debug mode is off"
    )
    structured_logging: bool = Field(
        default=False, description="Render log events as JSON instead of console text"
    )
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug_mode else self.log_level


# Singleton instance
_settings: AxtractSettings | None = None


def get_settings() -> AxtractSettings:
    """Get the singleton settings instance.

    Returns:
        AxtractSettings instance
    """
    global _settings

    if _settings is None:
        _settings = AxtractSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
