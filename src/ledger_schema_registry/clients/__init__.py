# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""HTTP clients for the ledger agent admin API.

Transport libraries (httpx) are imported only here; the models and the
schema cache stay free of I/O.
"""

from __future__ import annotations

from ledger_schema_registry.clients.schema_registry_client import (
    InvalidSchemaRecordError,
    SchemaNotFoundError,
    SchemaRegistryClient,
    SchemaRegistryError,
    UninitializedContextError,
    get_schema_registry_client,
    reset_schema_registry_client,
)

__all__ = [
    "InvalidSchemaRecordError",
    "SchemaNotFoundError",
    "SchemaRegistryClient",
    "SchemaRegistryError",
    "UninitializedContextError",
    "get_schema_registry_client",
    "reset_schema_registry_client",
]
