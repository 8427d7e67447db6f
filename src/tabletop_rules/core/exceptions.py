"""Custom exception hierarchy for the tabletop rules engine.

All exceptions inherit from RulesEngineError, so a host can catch the
whole family at its boundary while still seeing the domain-specific
context each error carries in ``details``. Every error here is a
programmer-error class failure: the engine raises it synchronously to
the immediate caller and never retries or swallows it.

Example:
    >>> from tabletop_rules.core.exceptions import ParseError
    >>> raise ParseError("Invalid dice expression", expression="2x6")
"""

from __future__ import annotations

from typing import Any


class RulesEngineError(Exception):
    """Base exception for all rules engine errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary containing additional error context.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        """Initialize the base exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary containing additional error context.
        """
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the exception message with optional details.

        Returns:
            Formatted error message including any provided details.
        """
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Game Engine Domain Exceptions
# =============================================================================


class GameEngineError(RulesEngineError):
    """Base exception for errors raised while resolving game mechanics."""


class ParseError(GameEngineError):
    """Raised when a dice expression does not match the dice notation.

    Malformed notation always surfaces as this error; it never defaults
    to a zero roll.
    """

    def __init__(
        self,
        message: str,
        *,
        expression: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize parse error with expression context.

        Args:
            message: Human-readable error description.
            expression: The dice expression that failed to parse.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if expression is not None:
            combined_details["expression"] = expression
        super().__init__(message, details=combined_details)


class UnsupportedSystemError(GameEngineError):
    """Raised when an engine is requested for an unknown rule system."""

    def __init__(
        self,
        message: str,
        *,
        system: str | None = None,
        supported: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unsupported system error.

        Args:
            message: Human-readable error description.
            system: The system key that was requested.
            supported: System keys the factory does know about.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if system is not None:
            combined_details["system"] = system
        if supported:
            combined_details["supported"] = supported
        super().__init__(message, details=combined_details)


class UninitializedSessionError(GameEngineError):
    """Raised when an engine method is called before ``init_session``."""

    def __init__(
        self,
        message: str,
        *,
        system: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize uninitialized session error.

        Args:
            message: Human-readable error description.
            system: System key of the engine that was called.
            operation: Name of the method that was called too early.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if system:
            combined_details["system"] = system
        if operation:
            combined_details["operation"] = operation
        super().__init__(message, details=combined_details)


# =============================================================================
# Configuration & Validation Exceptions
# =============================================================================


class ConfigurationError(RulesEngineError):
    """Raised when application configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error with config key context.

        Args:
            message: Human-readable error description.
            config_key: The configuration key that caused the error.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if config_key:
            combined_details["config_key"] = config_key
        super().__init__(message, details=combined_details)


class ValidationError(RulesEngineError):
    """Raised when an argument handed to the engine has the wrong shape.

    Examples are a non-integer seed or an actor list that is not a
    sequence of strings.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize validation error with field context.

        Args:
            message: Human-readable error description.
            field_name: Name of the field that failed validation.
            invalid_value: The value that failed validation.
            details: Optional dictionary containing additional error context.
        """
        combined_details = details or {}
        if field_name:
            combined_details["field_name"] = field_name
        if invalid_value is not None:
            combined_details["invalid_value"] = invalid_value
        super().__init__(message, details=combined_details)


__all__ = [
    "RulesEngineError",
    "GameEngineError",
    "ParseError",
    "UnsupportedSystemError",
    "UninitializedSessionError",
    "ConfigurationError",
    "ValidationError",
]
