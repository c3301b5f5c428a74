"""
Configuration

Central settings for the API client, calculators and scripts, read from
OCL_* environment variables or a local .env file.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Every field can be overridden with an environment variable carrying the
    OCL_ prefix, e.g. OCL_API_BASE_URL or OCL_API_TOKEN.
    """

    model_config = SettingsConfigDict(
        env_prefix="OCL_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_base_url: str = Field(
        default="http://localhost:5000",
        min_length=1,
        description="Base URL of the OCL REST API.",
    )
    api_token: str | None = Field(
        default=None,
        description="Bearer token sent as Authorization header (admin, office or corporate).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="ocl-shipping/1.0",
        min_length=1,
        description="User-Agent for API requests.",
    )

    rates_path: Path | None = Field(
        default=None,
        description="Path to a rate table JSON replacing the packaged rates.json.",
    )
    biller_state: str = Field(
        default="Assam",
        min_length=1,
        description="State OCL invoices from; decides CGST/SGST vs IGST.",
    )


def get_settings() -> Settings:
    """Load settings from the environment."""
    return Settings()
