"""
pharmacy_http_api/schemas/medicines.py

Pydantic models for the medicine inventory endpoints.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from ..db.models import MAX_QUANTITY
from .common import APIModel, SuccessResponse


class MedicineBase(APIModel):
    name: str = Field(..., min_length=1, description="Display name, e.g. 'Paracetamol 500mg'")
    company: str = Field(..., min_length=1, description="Manufacturer")
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Unit price")
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY, description="Units in stock")
    expiry_date: date = Field(..., description="Expiry date (YYYY-MM-DD)")


class MedicineCreate(MedicineBase):
    """
    Payload for creating a new medicine. All fields are required.
    """

    pass


class MedicineUpdate(APIModel):
    """
    Partial update payload; only provided fields are changed.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    company: Optional[str] = Field(default=None, min_length=1)
    price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    quantity: Optional[int] = Field(default=None, ge=0, le=MAX_QUANTITY)
    expiry_date: Optional[date] = None


class MedicineRead(MedicineBase):
    """
    Full medicine representation as returned by the API.
    """

    id: str = Field(..., description="Store-assigned identifier")
    created_at: datetime
    updated_at: datetime


class MedicineListResponse(SuccessResponse):
    count: int
    data: List[MedicineRead] = Field(default_factory=list)


class MedicineResponse(SuccessResponse):
    data: MedicineRead


__all__ = [
    "MedicineCreate",
    "MedicineUpdate",
    "MedicineRead",
    "MedicineListResponse",
    "MedicineResponse",
]
