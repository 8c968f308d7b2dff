# pharmacy_http_api/repositories/medicines.py

from __future__ import annotations

import math
from datetime import date
from typing import Any, Dict, Mapping, Optional, Sequence

from sqlalchemy import Select, func, select, update
from sqlalchemy.orm import Session

from ..db.models import MAX_QUANTITY, Medicine
from ..errors import NotFoundError, ValidationError

REQUIRED_FIELDS = ("name", "company", "price", "quantity", "expiry_date")
MUTABLE_FIELDS = frozenset(REQUIRED_FIELDS)


def _coerce_date(value: Any) -> date:
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
    raise ValidationError("expiryDate must be a calendar date (YYYY-MM-DD)")


def _clean_fields(fields: Mapping[str, Any], *, partial: bool) -> Dict[str, Any]:
    """
    Check and normalize medicine fields before they reach the store.

    With ``partial=False`` every required field must be present.
    """
    unknown = set(fields) - MUTABLE_FIELDS
    if unknown:
        raise ValidationError(f"Unknown medicine fields: {', '.join(sorted(unknown))}")

    if not partial:
        missing = [name for name in REQUIRED_FIELDS if fields.get(name) is None]
        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                details={"missing": missing},
            )

    cleaned: Dict[str, Any] = {}
    for key, value in fields.items():
        if value is None:
            raise ValidationError(f"{key} may not be null")

        if key in ("name", "company"):
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(f"{key} must be a non-empty string")
            value = value.strip()
        elif key == "price":
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                raise ValidationError("price must be a non-negative number")
            try:
                value = float(value)
            except OverflowError:
                value = math.inf
            # NaN also fails this check.
            if not math.isfinite(value):
                raise ValidationError("price must be a finite number")
        elif key == "quantity":
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValidationError("quantity must be a non-negative integer")
            if value > MAX_QUANTITY:
                raise ValidationError(f"quantity may not exceed {MAX_QUANTITY}")
        elif key == "expiry_date":
            value = _coerce_date(value)

        cleaned[key] = value
    return cleaned


class MedicinesRepository:
    """
    Thin data-access layer around the Medicine model.

    Every method is a single round trip to the store; nothing is cached
    between calls. Writes are flushed, committing is left to the caller.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(Medicine)

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def list(self) -> Sequence[Medicine]:
        """
        Return all medicines, alphabetically by name.
        """
        stmt = self._base_select().order_by(Medicine.name.asc(), Medicine.created_at.asc())
        return list(self.session.execute(stmt).scalars().all())

    def find(self, medicine_id: str) -> Optional[Medicine]:
        return self.session.get(Medicine, medicine_id)

    def get(self, medicine_id: str) -> Medicine:
        medicine = self.find(medicine_id)
        if medicine is None:
            raise NotFoundError(medicine_id)
        return medicine

    def count(self) -> int:
        return int(self.session.execute(select(func.count()).select_from(Medicine)).scalar_one())

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(self, fields: Mapping[str, Any]) -> Medicine:
        """
        Insert a new medicine and return it with its assigned id.
        """
        medicine = Medicine(**_clean_fields(fields, partial=False))
        self.session.add(medicine)
        self.session.flush()
        return medicine

    def update(self, medicine_id: str, fields: Mapping[str, Any]) -> Medicine:
        """
        Apply a partial update to an existing medicine.
        """
        cleaned = _clean_fields(fields, partial=True)
        medicine = self.get(medicine_id)

        for key, value in cleaned.items():
            setattr(medicine, key, value)

        self.session.add(medicine)
        self.session.flush()
        return medicine

    def delete(self, medicine_id: str) -> None:
        medicine = self.get(medicine_id)
        self.session.delete(medicine)
        self.session.flush()

    def decrement_stock(self, medicine_id: str, amount: int) -> bool:
        """
        Atomically subtract ``amount`` from stock if enough units remain.

        Returns False when the row is missing or holds fewer than
        ``amount`` units; stock is left untouched in that case.
        """
        stmt = (
            update(Medicine)
            .where(Medicine.id == medicine_id, Medicine.quantity >= amount)
            .values(quantity=Medicine.quantity - amount)
            .execution_options(synchronize_session=False)
        )
        result = self.session.execute(stmt)
        return result.rowcount == 1
