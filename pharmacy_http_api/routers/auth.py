# pharmacy_http_api/routers/auth.py

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from pharmacy_http_api.schemas.auth import LoginRequest, LoginResponse
from pharmacy_http_api.schemas.common import ErrorResponse
from pharmacy_http_api.services.auth_service import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


def get_auth_service(request: Request) -> AuthService:
    return AuthService(request.app.state.settings)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Check admin credentials",
)
def login(
    *,
    payload: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    return service.login(payload)
