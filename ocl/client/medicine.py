"""
Medicine Settlement Endpoints

Monthly settlement of medicine consignments and the OCL charge for a month.
"""

from __future__ import annotations

import logging

from shared.api import unwrap

from .base import Service
from .models import SettlementItem, SettlementSummary


logger = logging.getLogger(__name__)


def _period(month: int, year: int) -> dict[str, int]:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    if year < 2000:
        raise ValueError(f"year looks wrong: {year}")
    return {"month": month, "year": year}


class MedicineService(Service):

    def settlements(self, month: int, year: int) -> list[SettlementItem]:
        body = self.client.get("/api/admin/medicine/settlements", params=_period(month, year))
        data = unwrap(body)
        return [SettlementItem.model_validate(s) for s in data] if isinstance(data, list) else []

    def settlement_summary(self, month: int, year: int) -> SettlementSummary:
        body = self.client.get("/api/admin/medicine/settlements/summary", params=_period(month, year))
        data = unwrap(body)
        return SettlementSummary.model_validate(data if isinstance(data, dict) and data is not body else {})

    def set_ocl_charge(self, month: int, year: int, amount: float) -> None:
        if amount < 0:
            raise ValueError(f"OCL charge must not be negative, got {amount}")
        self.client.post(
            "/api/admin/medicine/ocl-charge",
            json={**_period(month, year), "amount": amount},
        )
        logger.info("Set OCL charge for %02d/%d to %.2f", month, year, amount)
