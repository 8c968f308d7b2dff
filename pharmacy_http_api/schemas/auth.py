"""
pharmacy_http_api/schemas/auth.py
"""

from __future__ import annotations

from typing import Any

from .common import APIModel, SuccessResponse


class LoginRequest(APIModel):
    # Any JSON value; non-strings never match the configured credentials.
    username: Any = ""
    password: Any = ""


class UserInfo(APIModel):
    username: str
    role: str


class LoginResponse(SuccessResponse):
    token: str
    user: UserInfo


__all__ = ["LoginRequest", "UserInfo", "LoginResponse"]
