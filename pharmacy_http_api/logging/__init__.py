# pharmacy_http_api/logging/__init__.py

"""
Logging helpers for the Pharmacy HTTP API.

API code does:

    from pharmacy_http_api.logging import get_logger

and stays decoupled from how structlog is wired up (see ``config.py``).
"""

from __future__ import annotations

from typing import Any, Optional

import structlog

DEFAULT_LOGGER_NAME = "pharmacy_http_api"


def get_logger(name: Optional[str] = None) -> Any:
    """
    Return a structlog logger bound to ``name`` (or the service default).
    """
    return structlog.get_logger(name or DEFAULT_LOGGER_NAME)


__all__ = ["get_logger", "DEFAULT_LOGGER_NAME"]
