# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""In-process schema cache."""

from ledger_schema_registry.registry.schema_cache import SchemaCache, SchemaRegistry

__all__ = ["SchemaCache", "SchemaRegistry"]
