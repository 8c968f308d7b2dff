"""
pharmacy_http_api/schemas/billing.py

Request/response models for ``POST /api/medicines/bill/process``.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import AliasChoices, Field

from ..db.models import MAX_QUANTITY
from .common import APIModel, SuccessResponse


class BillLineRequest(APIModel):
    medicine_id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("medicineId", "medicine_id", "id"),
    )
    requested_quantity: int = Field(
        ...,
        ge=1,
        le=MAX_QUANTITY,
        validation_alias=AliasChoices("requestedQuantity", "requested_quantity", "quantity"),
    )


class BillRequest(APIModel):
    """
    Ordered list of lines to bill. Lines are processed in the given order.
    """

    items: List[BillLineRequest] = Field(..., min_length=1)
    customer_name: Optional[str] = Field(default=None, description="Optional name printed on the bill")


class BillLine(APIModel):
    medicine_id: str
    name: str
    company: str
    price: float
    quantity: int
    line_total: float
    remaining_stock: int


class Bill(APIModel):
    customer_name: Optional[str] = None
    items: List[BillLine] = Field(default_factory=list)
    total_items: int = 0
    total_amount: float = 0.0


class BillResponse(SuccessResponse):
    bill: Bill


__all__ = ["BillLineRequest", "BillRequest", "BillLine", "Bill", "BillResponse"]
