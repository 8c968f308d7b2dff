# pharmacy_http_api/db/seed.py

"""
Sample inventory written to an empty store on first startup.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from pharmacy_http_api.logging import get_logger
from pharmacy_http_api.repositories.medicines import MedicinesRepository

logger = get_logger(__name__)


SAMPLE_MEDICINES: List[Dict[str, Any]] = [
    {
        "name": "Paracetamol 500mg",
        "company": "Cipla Ltd",
        "price": 5.50,
        "quantity": 150,
        "expiry_date": date(2025, 12, 31),
    },
    {
        "name": "Cetirizine 10mg",
        "company": "Sun Pharma",
        "price": 8.75,
        "quantity": 80,
        "expiry_date": date(2024, 11, 30),
    },
    {
        "name": "Aspirin 75mg",
        "company": "Bayer",
        "price": 12.99,
        "quantity": 5,
        "expiry_date": date(2024, 8, 15),
    },
    {
        "name": "Amoxicillin 500mg",
        "company": "GlaxoSmithKline",
        "price": 45.00,
        "quantity": 40,
        "expiry_date": date(2024, 9, 30),
    },
    {
        "name": "Vitamin C 1000mg",
        "company": "Dabur",
        "price": 25.50,
        "quantity": 120,
        "expiry_date": date(2026, 1, 31),
    },
]


def seed_sample_medicines(db: Session) -> int:
    """
    Insert the sample medicines if the collection is empty.

    Returns the number of rows inserted (0 when data already exists).
    """
    repo = MedicinesRepository(db)
    existing = repo.count()
    if existing:
        logger.info("sample_data_skipped", existing=existing)
        return 0

    for fields in SAMPLE_MEDICINES:
        repo.create(dict(fields))
    db.commit()

    logger.info("sample_data_created", inserted=len(SAMPLE_MEDICINES))
    return len(SAMPLE_MEDICINES)


__all__ = ["SAMPLE_MEDICINES", "seed_sample_medicines"]
