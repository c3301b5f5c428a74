"""
Shared API Access

HTTP client for the OCL REST API, shared by all endpoint wrappers.
"""

from .client import (
    ApiClient,
    ApiError,
    build_http_client,
    close_client,
    get_client,
    unwrap,
)

__all__ = [
    "ApiClient",
    "ApiError",
    "build_http_client",
    "close_client",
    "get_client",
    "unwrap",
]
