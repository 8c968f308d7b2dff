"""
Pydantic schemas exposed by the Pharmacy HTTP API.
"""

from .auth import LoginRequest, LoginResponse, UserInfo
from .billing import Bill, BillLine, BillLineRequest, BillRequest, BillResponse
from .common import APIModel, ErrorResponse, SuccessResponse
from .medicines import (
    MedicineCreate,
    MedicineListResponse,
    MedicineRead,
    MedicineResponse,
    MedicineUpdate,
)
from .system import HealthResponse, StoreDiagnosticResponse

__all__ = [
    "APIModel",
    "SuccessResponse",
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "UserInfo",
    "Bill",
    "BillLine",
    "BillLineRequest",
    "BillRequest",
    "BillResponse",
    "MedicineCreate",
    "MedicineUpdate",
    "MedicineRead",
    "MedicineListResponse",
    "MedicineResponse",
    "HealthResponse",
    "StoreDiagnosticResponse",
]
