# pharmacy_http_api/schemas/common.py

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    Fields are snake_case in Python and camelCase on the wire; either
    spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(APIModel):
    success: bool = True
    message: Optional[str] = None


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class ErrorResponse(APIModel):
    """
    Standard error envelope for all endpoints.
    """

    success: bool = False
    message: str = Field(..., description="Human-readable explanation of the error.")
    error: Optional[str] = Field(
        default=None,
        description="Underlying error detail (only exposed in development).",
    )
    details: Optional[Any] = Field(
        default=None,
        description="Optional structured details (field errors, stock levels, etc.).",
    )


__all__ = ["APIModel", "SuccessResponse", "ErrorResponse"]
