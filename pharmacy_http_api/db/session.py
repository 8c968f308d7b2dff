# pharmacy_http_api/db/session.py

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, Generator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from pharmacy_http_api.config import Settings

from .models import Base

# ---------------------------------------------------------------------------
# Record store handle
# ---------------------------------------------------------------------------


def _is_sqlite(url: str) -> bool:
    return url.startswith("sqlite")


def _is_in_memory_sqlite(url: str) -> bool:
    return _is_sqlite(url) and (url.rstrip("/") in ("sqlite:", "sqlite+pysqlite:") or ":memory:" in url)


class RecordStore:
    """
    Owns the SQLAlchemy engine and session factory for one application.

    An instance is created by ``create_app`` and stored on ``app.state.store``;
    request handlers reach it through ``get_session``.
    """

    def __init__(self, url: str, *, connect_timeout: int = 30, echo: bool = False) -> None:
        self.url = url

        connect_args: Dict[str, Any] = {}
        engine_kwargs: Dict[str, Any] = {}
        if _is_sqlite(url):
            # SQLite needs a special flag when used in a multi-threaded web app.
            connect_args = {"check_same_thread": False, "timeout": connect_timeout}
            if _is_in_memory_sqlite(url):
                engine_kwargs["poolclass"] = StaticPool
        else:
            connect_args = {"connect_timeout": connect_timeout}
            engine_kwargs["pool_pre_ping"] = True

        self.engine: Engine = create_engine(
            url,
            echo=echo,
            connect_args=connect_args,
            **engine_kwargs,
        )
        self.session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
            expire_on_commit=False,
            class_=Session,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "RecordStore":
        return cls(
            settings.DATABASE_URL,
            connect_timeout=settings.DB_CONNECT_TIMEOUT,
            echo=settings.DB_ECHO,
        )

    # ------------------------------------------------------------------
    # Connectivity
    # ------------------------------------------------------------------

    def ping(self) -> bool:
        """
        Return True if a round trip to the store succeeds.
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            return False
        return True

    def create_schema(self) -> None:
        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    @property
    def database_name(self) -> str:
        return self.engine.url.database or ""

    @property
    def host(self) -> str:
        return self.engine.url.host or "localhost"

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Context manager for non-request usage, e.g. startup seeding.

            with store.session() as db:
                ...
        """
        db = self.session_factory()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()


# ---------------------------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------------------------


def get_store(request: Request) -> RecordStore:
    return request.app.state.store


def get_session(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a session bound to the app's store and
    ensures it is closed afterwards.
    """
    db = get_store(request).session_factory()
    try:
        yield db
    finally:
        db.close()


__all__ = ["RecordStore", "get_store", "get_session"]
