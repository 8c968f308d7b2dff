# tests/conftest.py
from datetime import date
from typing import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from pharmacy_http_api.config import AppEnv, LogFormat, Settings
from pharmacy_http_api.db.session import RecordStore
from pharmacy_http_api.main import create_app


def make_settings(**overrides) -> Settings:
    """Settings for an isolated in-memory store, independent of the environment."""
    values = dict(
        DATABASE_URL="sqlite://",
        APP_ENV=AppEnv.TESTING,
        SEED_SAMPLE_DATA=False,
        LOG_FORMAT=LogFormat.CONSOLE,
        LOG_LEVEL="WARNING",
        ADMIN_USERNAME="admin",
        ADMIN_PASSWORD="admin123",
        ADMIN_TOKEN="demo_jwt_token_admin_2024",
    )
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """
    TestClient with the lifespan running (schema created, optional seed).

    Server exceptions are turned into 500 responses instead of being
    re-raised, so the generic error handler can be asserted on.
    """
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def store() -> Iterator[RecordStore]:
    record_store = RecordStore("sqlite://")
    record_store.create_schema()
    yield record_store
    record_store.dispose()


@pytest.fixture
def db(store: RecordStore) -> Iterator[Session]:
    session = store.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def medicine_fields() -> dict:
    return {
        "name": "Paracetamol 500mg",
        "company": "Cipla Ltd",
        "price": 5.50,
        "quantity": 150,
        "expiry_date": date(2025, 12, 31),
    }


@pytest.fixture
def medicine_payload() -> dict:
    """Same medicine as ``medicine_fields``, in wire format."""
    return {
        "name": "Paracetamol 500mg",
        "company": "Cipla Ltd",
        "price": 5.50,
        "quantity": 150,
        "expiryDate": "2025-12-31",
    }


@pytest.fixture
def app_factory():
    """Build an app with settings overrides on top of the test defaults."""

    def _factory(**overrides) -> FastAPI:
        return create_app(make_settings(**overrides))

    return _factory
