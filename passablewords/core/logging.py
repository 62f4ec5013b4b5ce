"""
Logging configuration for the library.

The library only emits through ``structlog.get_logger()``; applications that
already configure structlog can skip ``setup_logging`` entirely.
"""
import logging

import structlog

from passablewords.core.config import settings


def _render_processors(log_level: int) -> list:
    """Human-readable output when debugging, one JSON object per line otherwise."""
    if log_level <= logging.DEBUG:
        return [structlog.dev.set_exc_info, structlog.dev.ConsoleRenderer()]
    return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]


def setup_logging(log_level: int | None = None):
    """
    Configure structured logging.

    Args:
        log_level: Optional numeric level. Defaults to DEBUG in debug mode,
            otherwise the configured ``log_level`` setting. DEBUG and below
            render for the console, higher levels render JSON.
    """
    if log_level is None:
        log_level = logging.DEBUG if settings.debug else settings.log_level_number

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            *_render_processors(log_level),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None):
    """
    Get a structured logger.

    Args:
        name: Optional logger name.

    Returns:
        Structured logger instance.
    """
    return structlog.get_logger(name)
