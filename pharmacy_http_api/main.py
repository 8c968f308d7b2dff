"""
Entry point for the Pharmacy HTTP API.

This module creates the FastAPI application, wires up middleware and
exception handlers, and mounts the API, system and page routers.

Intended usage:
    uvicorn pharmacy_http_api.main:create_app --factory --host 0.0.0.0 --port 3000
or
    pharmacy-api
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from pharmacy_http_api.config import Settings, get_settings
from pharmacy_http_api.db.seed import seed_sample_medicines
from pharmacy_http_api.db.session import RecordStore
from pharmacy_http_api.errors import StoreConnectionError
from pharmacy_http_api.exception_handlers import register_exception_handlers
from pharmacy_http_api.logging.config import configure_logging
from pharmacy_http_api.routers import auth, medicines, pages, system

API_ENDPOINTS = [
    "GET    /api/health",
    "GET    /api/test-db",
    "GET    /api/medicines",
    "GET    /api/medicines/{id}",
    "POST   /api/medicines",
    "PUT    /api/medicines/{id}",
    "DELETE /api/medicines/{id}",
    "POST   /api/login",
    "POST   /api/medicines/bill/process",
]

STORE_REMEDIATION_HINTS = [
    "Check DATABASE_URL in the environment or .env file",
    "Make sure the database host accepts connections from this machine",
    "Check the database username and password",
    "Ensure network connectivity",
]


# ---------------------------------------------------------------------------
# Startup
# ---------------------------------------------------------------------------


def connect_store(store: RecordStore, settings: Settings, logger) -> bool:
    """
    Verify the store is reachable, create the schema and seed sample data.

    Returns False when the store is unreachable and the service is allowed
    to start without it; raises StoreConnectionError otherwise.
    """
    logger.info("store_connecting", url=store.engine.url.render_as_string(hide_password=True))

    if store.ping():
        store.create_schema()
        if settings.SEED_SAMPLE_DATA:
            try:
                with store.session() as db:
                    seed_sample_medicines(db)
            except SQLAlchemyError:
                logger.error("sample_data_failed", exc_info=True)
        logger.info("store_connected", database=store.database_name, host=store.host)
        return True

    logger.error(
        "store_connection_failed",
        database_url_set=bool(settings.DATABASE_URL),
        hints=STORE_REMEDIATION_HINTS,
    )
    if not settings.START_WITHOUT_STORE:
        raise StoreConnectionError("Cannot start server without database connection")

    logger.warning("store_unavailable_starting_anyway", crud_available=False)
    return False


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application instance.

    The store handle lives on ``app.state.store``; nothing is shared at
    module level, so several apps (e.g. in tests) can coexist.
    """
    settings = settings or get_settings()
    logger = configure_logging(settings)
    store = RecordStore.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.store_connected = connect_store(store, settings, logger)
        logger.info(
            "server_ready",
            server=settings.APP_NAME,
            url=f"http://localhost:{settings.PORT}",
            pages=list(pages.PAGES),
            endpoints=API_ENDPOINTS,
            store_connected=app.state.store_connected,
        )

        yield

        logger.info("server_shutdown")
        store.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=False,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.store_connected = False

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, expose_details=settings.debug)

    app.include_router(system.router)
    app.include_router(auth.router)
    app.include_router(medicines.router)
    app.include_router(pages.router)

    app.mount(
        "/static",
        StaticFiles(directory=settings.FRONTEND_DIR, check_dir=False),
        name="static",
    )

    return app


# ---------------------------------------------------------------------------
# Local development entry point
# ---------------------------------------------------------------------------


def run() -> None:
    settings = get_settings()

    import uvicorn

    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
    )


if __name__ == "__main__":
    run()
