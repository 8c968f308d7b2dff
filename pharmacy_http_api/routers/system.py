# pharmacy_http_api/routers/system.py

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from pharmacy_http_api.db.session import RecordStore, get_store
from pharmacy_http_api.exception_handlers import error_response
from pharmacy_http_api.logging import get_logger
from pharmacy_http_api.repositories.medicines import MedicinesRepository
from pharmacy_http_api.schemas.common import ErrorResponse
from pharmacy_http_api.schemas.system import HealthResponse, StoreDiagnosticResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health", response_model=HealthResponse)
def health(request: Request, store: RecordStore = Depends(get_store)) -> HealthResponse:
    """
    Liveness plus a real round trip to the record store.
    """
    settings = request.app.state.settings
    return HealthResponse(
        database="connected" if store.ping() else "disconnected",
        timestamp=datetime.now(timezone.utc),
        server=settings.APP_NAME,
        version=settings.APP_VERSION,
    )


@router.get(
    "/test-db",
    response_model=StoreDiagnosticResponse,
    responses={500: {"model": ErrorResponse}},
)
def store_diagnostic(store: RecordStore = Depends(get_store)):
    """
    Count medicines and report where the store lives.
    """
    try:
        with store.session() as db:
            count = MedicinesRepository(db).count()
    except SQLAlchemyError as exc:
        logger.error("store_diagnostic_failed", error=str(exc))
        return error_response(500, "Database test failed", error=str(exc))

    return StoreDiagnosticResponse(
        message="Database connection successful",
        connection_status="connected",
        medicine_count=count,
        database_name=store.database_name,
        host=store.host,
    )
