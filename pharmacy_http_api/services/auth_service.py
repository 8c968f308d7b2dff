# pharmacy_http_api/services/auth_service.py

from __future__ import annotations

import secrets
from typing import Any

from pharmacy_http_api.config import Settings
from pharmacy_http_api.errors import AuthenticationError
from pharmacy_http_api.logging import get_logger
from pharmacy_http_api.schemas.auth import LoginRequest, LoginResponse, UserInfo

logger = get_logger(__name__)


class AuthService:
    """
    Stateless credential check against the configured admin account.

    There is no session store: a match returns the configured static token.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    @staticmethod
    def _matches(given: Any, expected: str) -> bool:
        if not isinstance(given, str):
            return False
        return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))

    def login(self, payload: LoginRequest) -> LoginResponse:
        user_ok = self._matches(payload.username, self._settings.ADMIN_USERNAME)
        password_ok = self._matches(payload.password, self._settings.ADMIN_PASSWORD)
        if not (user_ok and password_ok):
            logger.warning("login_failed", username=str(payload.username))
            raise AuthenticationError()

        logger.info("login_succeeded", username=payload.username)
        return LoginResponse(
            message="Login successful",
            token=self._settings.ADMIN_TOKEN,
            user=UserInfo(username=self._settings.ADMIN_USERNAME, role="admin"),
        )
