"""
Booking Endpoints

Lookups used by the office booking panel and the "view bills" page.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Literal

from shared.api import unwrap

from .base import Service


logger = logging.getLogger(__name__)

AddressSide = Literal["origin", "destination"]


class BookingService(Service):

    def search_by_phone(self, phone_number: str, side: AddressSide = "origin") -> list[dict[str, Any]]:
        """
        Saved origin or destination addresses for a phone number.

        Non-digits are stripped before the lookup.
        """
        if side not in ("origin", "destination"):
            raise ValueError(f'side must be "origin" or "destination", got {side!r}')
        digits = re.sub(r"\D", "", phone_number)
        if not digits:
            raise ValueError("A phone number is required")
        body = self.client.get(
            "/api/customer-booking/search-by-phone",
            params={"phoneNumber": digits, "type": side},
        )
        return _records(body)

    def invoices_by_phone(self, phone_number: str) -> list[dict[str, Any]]:
        body = self.client.get(
            "/api/customer-booking/invoices-by-phone",
            params={"phoneNumber": phone_number.strip()},
        )
        invoices = _records(body)
        logger.info("Found %d invoice(s) for phone %s", len(invoices), phone_number)
        return invoices

    def invoices_by_email(self, email: str) -> list[dict[str, Any]]:
        body = self.client.get(
            "/api/customer-booking/invoices-by-email",
            params={"email": email.strip()},
        )
        invoices = _records(body)
        logger.info("Found %d invoice(s) for %s", len(invoices), email)
        return invoices


def _records(body: Any) -> list[dict[str, Any]]:
    data = unwrap(body)
    return data if isinstance(data, list) else []
