"""
Complaint Endpoints

Admin complaint desk and the corporate complaint desk.
"""

from __future__ import annotations

import logging

from shared.api import unwrap

from .base import Service, pagination_of
from .models import Complaint, ComplaintStats, Pagination


logger = logging.getLogger(__name__)

COMPLAINT_STATUSES = ("Open", "In Progress", "Resolved", "Closed")
PRIORITIES = ("High", "Medium", "Low")
CORPORATE_CATEGORIES = (
    "Delivery Issues",
    "Billing & Payment",
    "Package Damage",
    "Service Quality",
    "Tracking Issues",
    "Others",
)


class ComplaintService(Service):

    # -------------------------------------------------------------------------
    # ADMIN
    # -------------------------------------------------------------------------

    def list(
        self,
        page: int = 1,
        limit: int = 20,
        status: str | None = None,
        category: str | None = None,
        search: str | None = None,
    ) -> tuple[list[Complaint], Pagination | None]:
        body = self.client.get(
            "/api/customer-complain",
            params={
                "page": page,
                "limit": limit,
                "status": status,
                "category": category,
                "search": search or None,
            },
        )
        data = unwrap(body)
        complaints = [Complaint.model_validate(c) for c in data] if isinstance(data, list) else []
        return complaints, pagination_of(body)

    def stats(self) -> ComplaintStats:
        body = self.client.get("/api/customer-complain/stats")
        return ComplaintStats.model_validate(body.get("stats") or {})

    def update(
        self,
        complaint_id: str,
        status: str | None = None,
        response: str | None = None,
    ) -> Complaint:
        """Change a complaint's status and/or attach the admin response."""
        if status is not None and status not in COMPLAINT_STATUSES:
            raise ValueError(f"Invalid status {status!r}; expected one of {', '.join(COMPLAINT_STATUSES)}")
        payload = {k: v for k, v in {"status": status, "response": response}.items() if v is not None}
        if not payload:
            raise ValueError("Nothing to update: give a status or a response")
        body = self.client.put(f"/api/customer-complain/{complaint_id}", json=payload)
        logger.info("Updated complaint %s: %s", complaint_id, ", ".join(payload))
        return Complaint.model_validate(unwrap(body))

    # -------------------------------------------------------------------------
    # CORPORATE
    # -------------------------------------------------------------------------

    def corporate_list(self, status: str | None = None) -> list[Complaint]:
        body = self.client.get("/api/customer-complain/corporate", params={"status": status})
        return [Complaint.model_validate(c) for c in body.get("complaints") or []]

    def corporate_create(
        self,
        subject: str,
        category: str,
        message: str,
        priority: str = "Medium",
    ) -> Complaint:
        if not subject.strip() or not message.strip():
            raise ValueError("Subject and message are required")
        if category not in CORPORATE_CATEGORIES:
            raise ValueError(f"Invalid category {category!r}; expected one of {', '.join(CORPORATE_CATEGORIES)}")
        if priority not in PRIORITIES:
            raise ValueError(f"Invalid priority {priority!r}; expected one of {', '.join(PRIORITIES)}")
        body = self.client.post(
            "/api/customer-complain/corporate",
            json={"subject": subject, "category": category, "priority": priority, "message": message},
        )
        return Complaint.model_validate(body.get("complaint") or {})
