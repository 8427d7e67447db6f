"""Structured logging configuration for the tabletop rules engine.

Logging goes through structlog so that every resolution can carry its
mechanics (seed, roll, total, success) as structured fields. Development
runs get a colourised console renderer, production runs get JSON lines
suitable for a persisted message log.

Example:
    >>> from tabletop_rules.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Session started", system="dnd5e", seed=42)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from pathlib import Path

    from structlog.types import EventDict, WrappedLogger


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add application context to log entries.

    Args:
        logger: The wrapped logger instance.
        method_name: Name of the logging method called.
        event_dict: The event dictionary to modify.

    Returns:
        The modified event dictionary with app context.
    """
    event_dict["app"] = "tabletop_rules"
    return event_dict


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Configure application-wide logging.

    structlog renders each event to a single line and hands it to the
    standard library, whose handlers write it to stderr and, when
    ``log_file`` is given, append the same line to that file. stdout is
    left to the command line report.

    Args:
        level: The logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_format: Render JSON lines instead of console output.
        log_file: Optional path that receives a copy of every log line.

    Example:
        >>> configure_logging(level="DEBUG", log_file="rolls.log")
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                # No escape codes in a file copy.
                colors=log_file is None,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional name for the logger (typically __name__).

    Returns:
        A configured structlog BoundLogger instance.
    """
    return structlog.get_logger(name)


def session_logger(name: str, *, system: str, seed: int) -> structlog.BoundLogger:
    """Get a logger for one engine session.

    Every event logged through it carries the session's rule system and
    seed, which is enough to replay the session's dice.

    Args:
        name: Logger name (typically __name__).
        system: Rule system key of the session.
        seed: Seed the session's dice were created with.

    Returns:
        A structlog BoundLogger with ``system`` and ``seed`` bound.

    Example:
        >>> log = session_logger(__name__, system="pbta", seed=7)
        >>> log.info("Move resolved", tier="strong_hit")
    """
    return get_logger(name).bind(system=system, seed=seed)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    Useful for tagging every log line of one combat encounter with the
    host's encounter or request identifier.

    Args:
        **kwargs: Key-value pairs to bind to the logging context.

    Example:
        >>> bind_context(encounter_id="goblin-ambush")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "get_logger",
    "session_logger",
    "bind_context",
    "clear_context",
]
