"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        RulesEngineError: Base exception for all engine errors.
        ParseError: Malformed dice notation.
        UnsupportedSystemError: Unknown rule system key.
        UninitializedSessionError: Engine used before ``init_session``.

    Configuration:
        Settings: Main application settings class.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from tabletop_rules.core.config import (
    EngineSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from tabletop_rules.core.exceptions import (
    ConfigurationError,
    GameEngineError,
    ParseError,
    RulesEngineError,
    UninitializedSessionError,
    UnsupportedSystemError,
    ValidationError,
)
from tabletop_rules.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


__all__ = [
    # Exceptions
    "RulesEngineError",
    "GameEngineError",
    "ParseError",
    "UnsupportedSystemError",
    "UninitializedSessionError",
    "ConfigurationError",
    "ValidationError",
    # Configuration
    "Settings",
    "EngineSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
