"""
API Client and Operations

Handles the HTTP connection to the OCL REST API and unwraps its JSON
envelope. Shared across all endpoint wrappers.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from shared.config import Settings


logger = logging.getLogger(__name__)


# Global client object
_client: Optional["ApiClient"] = None


class ApiError(RuntimeError):
    """Raised when the API is unreachable or answers with a failure."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.message} (HTTP {self.status_code})"


# ============================================================================
# CLIENT
# ============================================================================

def build_http_client(
    settings: Settings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with the configured base URL, timeout and headers."""
    settings = settings or Settings()
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"
    return httpx.Client(
        base_url=settings.api_base_url,
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        headers=headers,
        transport=transport,
    )


def _error_message(body: Any, default: str) -> str:
    if isinstance(body, dict):
        for key in ("error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return default


class ApiClient:
    """
    Thin wrapper around `httpx.Client` for the OCL backend.

    Every endpoint answers with a JSON envelope such as
    {"success": true, "data": {...}} or {"success": false, "error": "..."}.
    `request` returns the decoded envelope and raises ApiError when the
    status is not 2xx or the envelope reports success = false.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        http: httpx.Client | None = None,
    ):
        self.settings = settings or Settings()
        self.http = http or build_http_client(self.settings)

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------------
    # REQUESTS
    # ------------------------------------------------------------------------

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        params = kwargs.get("params")
        if params:
            kwargs["params"] = {k: v for k, v in params.items() if v is not None}
        logger.debug("%s %s params=%s", method, path, kwargs.get("params"))
        try:
            response = self.http.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(f"Request to {path} failed: {e}") from e

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = _error_message(body, response.reason_phrase or "Request failed")
            logger.warning("%s %s -> %s: %s", method, path, response.status_code, message)
            raise ApiError(message, status_code=response.status_code)

        return response

    def request(self, method: str, path: str, **kwargs: Any) -> dict[str, Any]:
        """
        Send a request and return the decoded JSON envelope.

        Args:
            method: HTTP method
            path: Path relative to the API base URL (e.g. "/api/courier-boy")
            **kwargs: Passed to httpx (params, json, data, files)

        Raises:
            ApiError: On transport errors, non-2xx responses, undecodable
                bodies and envelopes with success = false
        """
        response = self._send(method, path, **kwargs)
        try:
            body = response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {path}", status_code=response.status_code) from e

        if isinstance(body, dict) and body.get("success") is False:
            message = _error_message(body, "Request failed")
            logger.warning("%s %s reported failure: %s", method, path, message)
            raise ApiError(message, status_code=response.status_code)

        return body

    def get(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return self.request("GET", path, **kwargs)

    def post(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return self.request("POST", path, **kwargs)

    def put(self, path: str, **kwargs: Any) -> dict[str, Any]:
        return self.request("PUT", path, **kwargs)

    def download(self, path: str, **kwargs: Any) -> bytes:
        """GET a binary document (e.g. an invoice PDF)."""
        response = self._send("GET", path, **kwargs)
        if not response.content:
            raise ApiError(f"Empty document from {path}", status_code=response.status_code)
        return response.content


def unwrap(body: Any, key: str = "data") -> Any:
    """Return body[key] when present and truthy, else the body itself."""
    if isinstance(body, dict) and body.get(key):
        return body[key]
    return body


# ============================================================================
# DEFAULT CLIENT MANAGEMENT
# ============================================================================

def get_client(force_new: bool = False) -> ApiClient:
    """
    Get or create the default API client.

    By default, returns the existing client if one exists.
    Use force_new=True to close it and create a fresh one.
    """
    global _client

    if force_new and _client is not None:
        _client.close()
        _client = None

    if _client is None:
        _client = ApiClient()

    return _client


def close_client() -> None:
    """Close the default API client if one exists."""
    global _client

    if _client is not None:
        try:
            _client.close()
        finally:
            _client = None
