"""
pharmacy_http_api.db
====================

Database package for the Pharmacy HTTP API.

    from pharmacy_http_api.db import Base, Medicine, RecordStore, get_session
"""

from .models import Base, Medicine
from .session import RecordStore, get_session, get_store

__all__ = [
    "Base",
    "Medicine",
    "RecordStore",
    "get_session",
    "get_store",
]
