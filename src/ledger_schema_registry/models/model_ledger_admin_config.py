# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""Configuration model for the ledger admin HTTP client."""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr, field_validator

API_KEY_HEADER = "X-API-Key"


class ModelLedgerAdminConfig(BaseModel):
    """Configuration for the ledger admin API client.

    Attributes:
        admin_url: Base URL of the agent's admin API (trailing slash stripped).
        api_key: Admin API key, sent as the X-API-Key header when set.
        timeout_seconds: HTTP request timeout in seconds.
        extra_headers: Additional headers forwarded on every request.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    admin_url: str = Field(description="Base URL of the ledger agent admin API.")
    api_key: SecretStr | None = Field(
        default=None,
        description="Admin API key forwarded in the X-API-Key header.",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0.0,
        description="HTTP request timeout in seconds.",
    )
    extra_headers: dict[str, str] = Field(
        default_factory=dict,
        description="Additional headers forwarded on every request.",
    )

    @field_validator("admin_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("admin_url must not be empty")
        return value

    def request_headers(self) -> dict[str, str]:
        """Build the headers shared by every admin API request."""
        headers = dict(self.extra_headers)
        if self.api_key is not None:
            headers[API_KEY_HEADER] = self.api_key.get_secret_value()
        return headers


__all__ = ["API_KEY_HEADER", "ModelLedgerAdminConfig"]
