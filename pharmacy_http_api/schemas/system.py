"""
pharmacy_http_api/schemas/system.py

Response models for the health and diagnostic endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from .common import APIModel, SuccessResponse


class HealthResponse(APIModel):
    status: str = "healthy"
    database: Literal["connected", "disconnected"]
    timestamp: datetime
    server: str
    version: str


class StoreDiagnosticResponse(SuccessResponse):
    connection_status: Literal["connected", "disconnected"]
    medicine_count: int
    database_name: str
    host: str


__all__ = ["HealthResponse", "StoreDiagnosticResponse"]
