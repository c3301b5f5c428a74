"""
Tracking Endpoints

Public consignment tracking and customer booking lookup.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from shared.api import ApiError, unwrap

from .base import Service
from .models import CustomerBooking, MovementEvent


logger = logging.getLogger(__name__)


class TrackingService(Service):

    def track(self, consignment_number: str | int) -> CustomerBooking:
        """
        Tracking record for a consignment.

        Raises:
            ApiError: If the consignment is unknown (HTTP 404) or the API fails
        """
        number = _path_segment(consignment_number)
        body = self.client.get(f"/api/tracking/{number}")
        data = unwrap(body)
        if not isinstance(data, dict) or data is body:
            raise ApiError(f"No tracking data for {consignment_number}")
        logger.info("Tracked consignment %s", consignment_number)
        return CustomerBooking.model_validate(data)

    def movement_history(self, consignment_number: str | int) -> list[MovementEvent]:
        """Timestamped movement events, oldest first as sent by the API."""
        number = _path_segment(consignment_number)
        body = self.client.get(f"/api/tracking/{number}/movement-history")
        data = unwrap(body)
        events = data.get("movementHistory") if isinstance(data, dict) else None
        return [MovementEvent.model_validate(e) for e in events or []]

    def customer_booking(self, booking_reference: str) -> CustomerBooking:
        """Online customer booking by its reference."""
        reference = _path_segment(booking_reference)
        body = self.client.get(f"/api/customer-booking/{reference}")
        data = unwrap(body)
        if not isinstance(data, dict) or data is body:
            raise ApiError(f"No booking found for {booking_reference}")
        return CustomerBooking.model_validate(data)


def _path_segment(value: str | int) -> str:
    text = str(value).strip()
    if not text:
        raise ValueError("A consignment number or booking reference is required")
    return quote(text, safe="")
