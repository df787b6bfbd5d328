# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""Environment-backed settings for the ledger admin API client.

Environment variables:
    LEDGER_ADMIN_URL: Base URL of the agent admin API (required)
    LEDGER_ADMIN_API_KEY: Admin API key (optional)
    LEDGER_ADMIN_TIMEOUT_SECONDS: Request timeout in seconds (default 30.0)
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ledger_schema_registry.models.model_ledger_admin_config import (
    ModelLedgerAdminConfig,
)


class LedgerAdminSettings(BaseSettings):
    """Ledger admin API settings loaded from LEDGER_ADMIN_* variables."""

    model_config = SettingsConfigDict(env_prefix="LEDGER_ADMIN_", extra="ignore")

    url: str = Field(..., description="Base URL of the agent admin API")
    api_key: SecretStr | None = Field(default=None, description="Admin API key")
    timeout_seconds: float = Field(
        default=30.0, gt=0.0, description="Request timeout in seconds"
    )

    def to_client_config(self) -> ModelLedgerAdminConfig:
        return ModelLedgerAdminConfig(
            admin_url=self.url,
            api_key=self.api_key,
            timeout_seconds=self.timeout_seconds,
        )


__all__ = ["LedgerAdminSettings"]
