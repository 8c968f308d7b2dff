# pharmacy_http_api/config.py

"""
Configuration for the Pharmacy HTTP API.

All tunables live on a single ``Settings`` object, populated from
environment variables (and an optional ``.env`` file) by pydantic-settings.

Environment variables
=====================

- PORT / HOST
    Where uvicorn binds. Default: 0.0.0.0:3000

- DATABASE_URL
    SQLAlchemy URL of the record store.
    Default: "sqlite:///./pharmacy.db"

- DB_CONNECT_TIMEOUT
    Seconds to wait when establishing a store connection. Default: 30

- START_WITHOUT_STORE
    If true, the service keeps running when the store is unreachable at
    startup (pages work, CRUD does not). Default: false

- APP_ENV
    "development", "production" or "testing". Error details are only
    exposed in 500 responses when set to "development".

- ADMIN_USERNAME / ADMIN_PASSWORD / ADMIN_TOKEN
    Credentials accepted by ``POST /api/login`` and the bearer token it
    hands back.

Typical usage
=============

    from pharmacy_http_api.config import Settings
    from pharmacy_http_api.main import create_app

    app = create_app(Settings(DATABASE_URL="sqlite://"))
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_STATIC_DIR = Path(__file__).resolve().parent / "static"

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """
    Central configuration registry for the service.
    """

    # --- Application Meta ---
    APP_NAME: str = "Pharmacy Management System"
    APP_VERSION: str = "1.0.0"
    APP_ENV: AppEnv = AppEnv.PRODUCTION

    # --- HTTP ---
    HOST: str = "0.0.0.0"
    PORT: int = Field(3000, ge=1, le=65535)
    CORS_ORIGINS: str = "*"

    # --- Record store ---
    DATABASE_URL: str = "sqlite:///./pharmacy.db"
    DB_CONNECT_TIMEOUT: int = Field(30, ge=1)
    DB_ECHO: bool = False
    START_WITHOUT_STORE: bool = False
    SEED_SAMPLE_DATA: bool = True

    # --- Static pages ---
    FRONTEND_DIR: Path = PACKAGE_STATIC_DIR

    # --- Login ---
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_TOKEN: str = "demo_jwt_token_admin_2024"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.JSON

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        level = value.strip().upper() or "INFO"
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown LOG_LEVEL {value!r}")
        return level

    @property
    def debug(self) -> bool:
        return self.APP_ENV == AppEnv.DEVELOPMENT

    @property
    def cors_origins(self) -> List[str]:
        """
        Parse the comma-separated CORS_ORIGINS value into a list.
        """
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw or raw == "*":
            return ["*"]
        return [p.strip() for p in raw.split(",") if p.strip()]


def get_settings() -> Settings:
    """
    Build a fresh Settings instance from the current environment.
    """
    return Settings()


__all__ = ["AppEnv", "LogFormat", "Settings", "get_settings", "PACKAGE_STATIC_DIR"]
