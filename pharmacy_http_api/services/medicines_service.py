# pharmacy_http_api/services/medicines_service.py

from __future__ import annotations

from typing import List

from pharmacy_http_api.logging import get_logger
from pharmacy_http_api.repositories.medicines import MedicinesRepository
from pharmacy_http_api.schemas.medicines import MedicineCreate, MedicineRead, MedicineUpdate

logger = get_logger(__name__)


class MedicinesService:
    """
    CRUD operations over the medicine inventory.

    Delegates persistence to `MedicinesRepository`, commits each write and
    converts ORM rows to `MedicineRead`.
    """

    def __init__(self, repo: MedicinesRepository) -> None:
        self._repo = repo

    def list_medicines(self) -> List[MedicineRead]:
        return [MedicineRead.model_validate(m) for m in self._repo.list()]

    def get_medicine(self, medicine_id: str) -> MedicineRead:
        return MedicineRead.model_validate(self._repo.get(medicine_id))

    def count_medicines(self) -> int:
        return self._repo.count()

    def create_medicine(self, payload: MedicineCreate) -> MedicineRead:
        medicine = self._repo.create(payload.model_dump())
        self._repo.session.commit()

        logger.info("medicine_created", medicine_id=medicine.id, name=medicine.name)
        return MedicineRead.model_validate(medicine)

    def update_medicine(self, medicine_id: str, payload: MedicineUpdate) -> MedicineRead:
        medicine = self._repo.update(medicine_id, payload.model_dump(exclude_unset=True))
        self._repo.session.commit()

        logger.info("medicine_updated", medicine_id=medicine_id)
        return MedicineRead.model_validate(medicine)

    def delete_medicine(self, medicine_id: str) -> None:
        self._repo.delete(medicine_id)
        self._repo.session.commit()

        logger.info("medicine_deleted", medicine_id=medicine_id)
