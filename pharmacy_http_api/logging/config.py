# pharmacy_http_api/logging/config.py

"""
structlog configuration for the Pharmacy HTTP API.

Called once from the application factory. Emits JSON lines in production
and colored console output when ``LOG_FORMAT=console``.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, List

import structlog

from pharmacy_http_api.config import LogFormat, Settings

from . import DEFAULT_LOGGER_NAME, get_logger


def configure_logging(settings: Settings, *, service_name: str = DEFAULT_LOGGER_NAME) -> Any:
    """
    Configure structlog and the standard library logging module, then
    return the service logger.
    """
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if settings.LOG_FORMAT == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(settings.LOG_LEVEL)
        ),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Third-party libraries (uvicorn, SQLAlchemy) log through stdlib.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.LOG_LEVEL,
    )

    return get_logger(service_name)


__all__ = ["configure_logging"]
