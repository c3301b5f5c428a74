"""
Service Base

Common plumbing for the endpoint wrappers.
"""

from __future__ import annotations

from typing import Any

from shared.api import ApiClient, get_client

from .models import Pagination


class Service:
    """Holds the API client; the shared default client unless one is given."""

    def __init__(self, client: ApiClient | None = None):
        self._client = client

    @property
    def client(self) -> ApiClient:
        if self._client is None:
            self._client = get_client()
        return self._client


def pagination_of(body: dict[str, Any]) -> Pagination | None:
    raw = body.get("pagination")
    return Pagination.model_validate(raw) if isinstance(raw, dict) else None
