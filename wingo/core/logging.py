"""Structured logging for the forecaster.

Colored console output in development, JSON lines in production. Everything
goes to stderr so CLI output on stdout stays machine readable.
"""

from __future__ import annotations

import logging
import sys
from typing import cast

import structlog

from wingo.config import settings

_CONFIGURED = False


def _configure_structlog() -> None:
    level = getattr(logging, settings.wingo_log_level.upper(), logging.INFO)

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if settings.wingo_env == "production":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a named logger instance.

    Args:
        name: Logger name (typically module __name__).
    """
    global _CONFIGURED
    if not _CONFIGURED:
        _configure_structlog()
        _CONFIGURED = True
    return cast(structlog.typing.FilteringBoundLogger, structlog.get_logger(name))
