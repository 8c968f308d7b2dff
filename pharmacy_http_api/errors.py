# pharmacy_http_api/errors.py

"""
Domain errors raised by repositories and services.

Each error knows the HTTP status it maps to; ``exception_handlers`` turns
them into the ``{success: false, message, ...}`` envelope.
"""

from __future__ import annotations

from typing import Any, Optional


class PharmacyError(Exception):
    """Base class for all domain-level exceptions."""

    status_code: int = 500

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)


class ValidationError(PharmacyError):
    """Raised when required fields are missing or field values are invalid."""

    status_code = 400


class NotFoundError(PharmacyError):
    """Raised when a medicine id does not exist in the store."""

    status_code = 404

    def __init__(self, medicine_id: str) -> None:
        super().__init__(f"Medicine '{medicine_id}' not found")
        self.medicine_id = medicine_id


class InsufficientStockError(PharmacyError):
    """Raised when a bill line asks for more units than are in stock."""

    status_code = 422

    def __init__(self, name: str, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for {name}: requested {requested}, available {available}",
            details={"requested": requested, "available": available},
        )
        self.requested = requested
        self.available = available


class AuthenticationError(PharmacyError):
    """Raised when the login credentials do not match."""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class StoreConnectionError(PharmacyError):
    """Raised at startup when the record store cannot be reached."""

    status_code = 503


__all__ = [
    "PharmacyError",
    "ValidationError",
    "NotFoundError",
    "InsufficientStockError",
    "AuthenticationError",
    "StoreConnectionError",
]
