"""
Courier Endpoints

Admin review of courier boy applications.
"""

from __future__ import annotations

import logging

from .base import Service, pagination_of
from .models import CourierApplication, Pagination


logger = logging.getLogger(__name__)

APPLICATION_STATUSES = ("pending", "approved", "rejected")


class CourierService(Service):

    def list_applications(
        self,
        page: int = 1,
        limit: int = 10,
        search: str | None = None,
        status: str | None = None,
    ) -> tuple[list[CourierApplication], Pagination | None]:
        """
        One page of applications.

        A status of "all" (or None) lists every status.
        """
        if status == "all":
            status = None
        if status is not None and status not in APPLICATION_STATUSES:
            raise ValueError(f"Invalid status {status!r}; expected one of {', '.join(APPLICATION_STATUSES)}")
        body = self.client.get(
            "/api/courier-boy",
            params={"page": page, "limit": limit, "search": search or None, "status": status},
        )
        applications = [CourierApplication.model_validate(c) for c in body.get("courierBoys") or []]
        return applications, pagination_of(body)

    def approve(self, courier_id: str, courier_type: str) -> None:
        """Approve an application as the given courier type (e.g. "customer", "medicine")."""
        if not courier_type:
            raise ValueError("A courier type is required to approve an application")
        self.client.put(f"/api/courier-boy/{courier_id}/approve", json={"type": courier_type})
        logger.info("Approved courier %s as %s", courier_id, courier_type)

    def reject(self, courier_id: str) -> None:
        self.client.put(f"/api/courier-boy/{courier_id}/reject")
        logger.info("Rejected courier %s", courier_id)
