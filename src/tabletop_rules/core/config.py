"""Configuration management for the tabletop rules engine.

Settings are loaded with pydantic-settings from environment variables and
an optional ``.env`` file. The rule system is chosen here once per process
and then handed explicitly to the engine factory; engines themselves never
read configuration.

Example:
    >>> from tabletop_rules.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.engine.system
    'dnd5e'

Environment Variables:
    RULES_ENGINE_SYSTEM: Rule system key ("dnd5e" or "pbta")
    RULES_ENGINE_DEFAULT_SEED: Seed used by the smoke command when none is given
    RULES_ENGINE_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    RULES_ENGINE_LOG_JSON: Emit JSON log lines instead of console output
    RULES_ENGINE_LOG_FILE: Also write log lines to this file
    RULES_ENGINE_DEBUG: Log at DEBUG level regardless of RULES_ENGINE_LOG_LEVEL
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tabletop_rules.core.exceptions import ConfigurationError


class EngineSettings(BaseSettings):
    """Configuration for rules engine selection.

    Attributes:
        system: Key of the rule system adapter to build for this process.
        default_seed: Seed for diagnostic runs that do not supply one.
    """

    model_config = SettingsConfigDict(
        env_prefix="RULES_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    system: str = Field(
        default="dnd5e",
        min_length=1,
        description="Rule system key",
    )
    default_seed: int = Field(
        default=42,
        description="Seed for diagnostic runs",
    )

    @field_validator("system", mode="after")
    @classmethod
    def normalize_system(cls, value: str) -> str:
        """Lower-case and strip the system key.

        Unknown keys are not rejected here; the engine factory raises
        UnsupportedSystemError for them when the engine is built.
        """
        return value.strip().lower()


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        debug: Log every dice draw and resolution (forces DEBUG level).
        log_level: Application logging level.
        log_json: Render logs as JSON lines.
        log_file: Optional file that receives a copy of the log output.
        engine: Rules engine settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="RULES_ENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    debug: bool = Field(
        default=False,
        description="Log every roll at DEBUG level",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON",
    )
    log_file: Path | None = Field(
        default=None,
        description="Copy log output to this file",
    )

    engine: EngineSettings = Field(default_factory=EngineSettings)

    @property
    def effective_log_level(self) -> str:
        """The level logging should be configured with.

        Returns:
            "DEBUG" in debug mode, otherwise ``log_level``.
        """
        return "DEBUG" if self.debug else self.log_level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the application settings singleton.

    Returns:
        The application Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load application settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access."""
    get_settings.cache_clear()


__all__ = [
    "EngineSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
