# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""Pydantic models for the ledger admin API.

Exports:
    - ModelLedgerAdminConfig: connection settings for the admin API client
    - ModelSchemaDefinition: caller input for publishing a schema
    - ModelSchemaDescriptor: nested ledger schema object
    - ModelSchemaRecord: ledger response carrying a schema
    - ModelTaaAcceptance: Transaction Author Agreement acceptance body
"""

from ledger_schema_registry.models.model_ledger_admin_config import (
    ModelLedgerAdminConfig,
)
from ledger_schema_registry.models.model_schema_definition import (
    ModelSchemaDefinition,
)
from ledger_schema_registry.models.model_schema_record import (
    ModelSchemaDescriptor,
    ModelSchemaRecord,
)
from ledger_schema_registry.models.model_taa_acceptance import ModelTaaAcceptance

__all__ = [
    "ModelLedgerAdminConfig",
    "ModelSchemaDefinition",
    "ModelSchemaDescriptor",
    "ModelSchemaRecord",
    "ModelTaaAcceptance",
]
