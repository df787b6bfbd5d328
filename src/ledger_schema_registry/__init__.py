# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""Ledger Schema Registry - async client and cache for a ledger admin API.

Quick Start:
    >>> from ledger_schema_registry import (
    ...     ModelLedgerAdminConfig,
    ...     ModelSchemaDefinition,
    ...     SchemaRegistryClient,
    ... )
    >>> config = ModelLedgerAdminConfig(admin_url="http://localhost:8024")
    >>> async with SchemaRegistryClient(config) as client:  # doctest: +SKIP
    ...     await client.sign_agreement()
    ...     record = await client.publish_schema(
    ...         ModelSchemaDefinition(
    ...             schema_name="identity",
    ...             schema_version="1.0",
    ...             attributes=["name", "email"],
    ...             default=True,
    ...         )
    ...     )
"""

from ledger_schema_registry.clients import (
    InvalidSchemaRecordError,
    SchemaNotFoundError,
    SchemaRegistryClient,
    SchemaRegistryError,
    UninitializedContextError,
    get_schema_registry_client,
    reset_schema_registry_client,
)
from ledger_schema_registry.models import (
    ModelLedgerAdminConfig,
    ModelSchemaDefinition,
    ModelSchemaDescriptor,
    ModelSchemaRecord,
    ModelTaaAcceptance,
)
from ledger_schema_registry.registry import SchemaCache, SchemaRegistry

__version__ = "0.1.0"

__all__ = [
    "InvalidSchemaRecordError",
    "ModelLedgerAdminConfig",
    "ModelSchemaDefinition",
    "ModelSchemaDescriptor",
    "ModelSchemaRecord",
    "ModelTaaAcceptance",
    "SchemaCache",
    "SchemaNotFoundError",
    "SchemaRegistry",
    "SchemaRegistryClient",
    "SchemaRegistryError",
    "UninitializedContextError",
    "get_schema_registry_client",
    "reset_schema_registry_client",
]
