# pharmacy_http_api/routers/medicines.py

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from pharmacy_http_api.db.session import get_session
from pharmacy_http_api.repositories.medicines import MedicinesRepository
from pharmacy_http_api.schemas.billing import BillRequest, BillResponse
from pharmacy_http_api.schemas.common import SuccessResponse
from pharmacy_http_api.schemas.medicines import (
    MedicineCreate,
    MedicineListResponse,
    MedicineResponse,
    MedicineUpdate,
)
from pharmacy_http_api.services.billing_service import BillingService
from pharmacy_http_api.services.medicines_service import MedicinesService

router = APIRouter(prefix="/api/medicines", tags=["medicines"])


def get_medicines_service(session: Session = Depends(get_session)) -> MedicinesService:
    """
    Dependency-injected factory for MedicinesService.

    Tests can swap the implementation via ``app.dependency_overrides``.
    """
    return MedicinesService(MedicinesRepository(session))


def get_billing_service(session: Session = Depends(get_session)) -> BillingService:
    return BillingService(MedicinesRepository(session))


@router.get(
    "",
    response_model=MedicineListResponse,
    summary="List medicines",
)
def list_medicines(
    *,
    service: MedicinesService = Depends(get_medicines_service),
) -> MedicineListResponse:
    medicines = service.list_medicines()
    return MedicineListResponse(count=len(medicines), data=medicines)


@router.post(
    "",
    response_model=MedicineResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a medicine",
)
def create_medicine(
    *,
    payload: MedicineCreate,
    service: MedicinesService = Depends(get_medicines_service),
) -> MedicineResponse:
    medicine = service.create_medicine(payload)
    return MedicineResponse(message="Medicine added successfully", data=medicine)


# Registered before "/{medicine_id}" so the literal path is matched first.
@router.post(
    "/bill/process",
    response_model=BillResponse,
    summary="Process a bill",
    description=(
        "Price each requested line against current stock and deduct the "
        "quantities. Lines are committed one by one; a failing line does not "
        "undo the lines before it."
    ),
)
def process_bill(
    *,
    payload: BillRequest,
    service: BillingService = Depends(get_billing_service),
) -> BillResponse:
    bill = service.process_bill(payload)
    return BillResponse(message="Bill processed successfully", bill=bill)


@router.get(
    "/{medicine_id}",
    response_model=MedicineResponse,
    summary="Get a single medicine",
)
def get_medicine(
    *,
    medicine_id: str,
    service: MedicinesService = Depends(get_medicines_service),
) -> MedicineResponse:
    return MedicineResponse(data=service.get_medicine(medicine_id))


@router.put(
    "/{medicine_id}",
    response_model=MedicineResponse,
    summary="Update a medicine",
)
def update_medicine(
    *,
    medicine_id: str,
    payload: MedicineUpdate,
    service: MedicinesService = Depends(get_medicines_service),
) -> MedicineResponse:
    medicine = service.update_medicine(medicine_id, payload)
    return MedicineResponse(message="Medicine updated successfully", data=medicine)


@router.delete(
    "/{medicine_id}",
    response_model=SuccessResponse,
    summary="Delete a medicine",
)
def delete_medicine(
    *,
    medicine_id: str,
    service: MedicinesService = Depends(get_medicines_service),
) -> SuccessResponse:
    service.delete_medicine(medicine_id)
    return SuccessResponse(message="Medicine deleted successfully")
