"""
Admin Endpoints

Force delivery, consolidated corporate invoices and invoice maintenance.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

from shared.api import ApiError, unwrap

from .base import Service, pagination_of
from .models import ConsolidatedInvoice, Pagination


logger = logging.getLogger(__name__)

DeliverySource = Literal["tracking", "customerbooking"]

_FORCE_DELIVERY_PATHS: dict[str, tuple[str, str]] = {
    "tracking": ("/api/admin/tracking/force-delivery", "trackingId"),
    "customerbooking": ("/api/admin/customerbookings/force-delivery", "bookingId"),
}


class AdminService(Service):

    # -------------------------------------------------------------------------
    # FORCE DELIVERY
    # -------------------------------------------------------------------------

    def force_delivery_queue(
        self,
        source: DeliverySource,
        page: int = 1,
        limit: int = 21,
    ) -> tuple[list[dict[str, Any]], Pagination | None]:
        """Undelivered shipments from one collection that can be force delivered."""
        path, _ = _force_delivery_path(source)
        body = self.client.get(path, params={"page": page, "limit": limit})
        data = unwrap(body)
        records = data if isinstance(data, list) else []
        return [{**r, "source": source} for r in records], pagination_of(body)

    def force_deliver(
        self,
        source: DeliverySource,
        record_id: str,
        person_name: str,
        vehicle_type: str,
        vehicle_number: str,
        pod_file: Path,
    ) -> dict[str, Any]:
        """
        Mark a shipment delivered with proof of delivery.

        Sent as multipart form data; the POD file is uploaded as podFile.
        """
        path, id_field = _force_delivery_path(source)
        if not person_name.strip() or not vehicle_number.strip():
            raise ValueError("Person name and vehicle number are required")
        pod_file = Path(pod_file)
        with pod_file.open("rb") as f:
            body = self.client.post(
                path,
                data={
                    id_field: record_id,
                    "personName": person_name.strip(),
                    "vehicleType": vehicle_type,
                    "vehicleNumber": vehicle_number.strip(),
                },
                files={"podFile": (pod_file.name, f)},
            )
        logger.info("Force delivered %s %s", source, record_id)
        return body

    # -------------------------------------------------------------------------
    # INVOICES
    # -------------------------------------------------------------------------

    def consolidated_invoice(self, corporate_id: str) -> ConsolidatedInvoice | None:
        """
        Unpaid FP shipments of a corporate (ObjectId or code such as A00001).

        Returns None when the corporate has nothing to invoice.
        """
        if not corporate_id:
            raise ValueError("A corporate id is required")
        body = self.client.get(
            "/api/settlement/admin/consolidated-invoice",
            params={"corporateId": corporate_id},
        )
        data = unwrap(body)
        if not isinstance(data, dict) or data is body:
            raise ApiError(f"No invoice data for corporate {corporate_id}")
        invoice = data.get("consolidatedInvoice", data)
        if not invoice:
            logger.info("No consolidated invoice for corporate %s", corporate_id)
            return None
        return ConsolidatedInvoice.model_validate(invoice)

    def update_invoice(self, invoice_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        if not fields:
            raise ValueError("No invoice fields to update")
        body = self.client.put(f"/api/admin/invoices/{invoice_id}", json=fields)
        logger.info("Updated invoice %s: %s", invoice_id, ", ".join(fields))
        return unwrap(body)

    def list_corporates(self) -> list[dict[str, Any]]:
        body = self.client.get("/api/admin/corporates")
        corporates = body.get("corporates")
        return corporates if isinstance(corporates, list) else []


def _force_delivery_path(source: str) -> tuple[str, str]:
    try:
        return _FORCE_DELIVERY_PATHS[source]
    except KeyError:
        raise ValueError(f'source must be "tracking" or "customerbooking", got {source!r}') from None
