# pharmacy_http_api/services/billing_service.py

"""
Bill processing.

Lines are priced and deducted from stock one at a time, each in its own
commit. A failure on line N raises after lines 1..N-1 have already been
committed; nothing is rolled back.
"""

from __future__ import annotations

from typing import List

from pharmacy_http_api.errors import InsufficientStockError
from pharmacy_http_api.logging import get_logger
from pharmacy_http_api.repositories.medicines import MedicinesRepository
from pharmacy_http_api.schemas.billing import Bill, BillLine, BillLineRequest, BillRequest

logger = get_logger(__name__)


def line_total(price: float, quantity: int) -> float:
    return round(price * quantity, 2)


class BillingService:
    def __init__(self, repo: MedicinesRepository) -> None:
        self._repo = repo

    def process_bill(self, request: BillRequest) -> Bill:
        lines: List[BillLine] = []
        total = 0.0

        for position, item in enumerate(request.items, start=1):
            line = self._process_line(position, item)
            lines.append(line)
            total += line.line_total

        bill = Bill(
            customer_name=request.customer_name,
            items=lines,
            total_items=sum(line.quantity for line in lines),
            total_amount=round(total, 2),
        )
        logger.info(
            "bill_processed",
            lines=len(lines),
            total_amount=bill.total_amount,
        )
        return bill

    def _process_line(self, position: int, item: BillLineRequest) -> BillLine:
        session = self._repo.session
        medicine = self._repo.get(item.medicine_id)

        if item.requested_quantity > medicine.quantity:
            logger.warning(
                "bill_line_rejected",
                line=position,
                medicine_id=medicine.id,
                requested=item.requested_quantity,
                available=medicine.quantity,
            )
            raise InsufficientStockError(medicine.name, item.requested_quantity, medicine.quantity)

        # Stock may have moved since the read; the conditional update is the
        # authoritative check.
        if not self._repo.decrement_stock(medicine.id, item.requested_quantity):
            session.rollback()
            session.refresh(medicine)
            raise InsufficientStockError(medicine.name, item.requested_quantity, medicine.quantity)

        session.commit()
        session.refresh(medicine)

        return BillLine(
            medicine_id=medicine.id,
            name=medicine.name,
            company=medicine.company,
            price=medicine.price,
            quantity=item.requested_quantity,
            line_total=line_total(medicine.price, item.requested_quantity),
            remaining_stock=medicine.quantity,
        )
