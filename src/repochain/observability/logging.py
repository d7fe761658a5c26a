"""Structured logging configuration using structlog.

Why this exists:
- Provides consistent, structured logging across the system
- Makes repository naming and chain mutations traceable

How to use:
    from repochain.observability.logging import get_logger

    logger = get_logger(__name__)
    logger.info("repository_registered", name="flatDir", resolver_count=1)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from repochain.config.schema import AppConfig


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to log events."""
    event_dict["app"] = "repochain"
    return event_dict


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output logs as JSON; otherwise use console format
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    # Logs go to stderr so command output on stdout stays machine readable.
    # The stream is looked up per logger, after any redirection of sys.stderr.
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper())
        ),
        context_class=dict,
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def configure_from_config(config: AppConfig) -> None:
    """Configure logging from an AppConfig object."""
    configure_logging(level=config.log_level.value, json_logs=config.json_logs)
