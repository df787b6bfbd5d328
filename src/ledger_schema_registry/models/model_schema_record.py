# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""Schema records returned by the ledger admin API.

``POST /schemas`` answers with ``{"schema_id": ..., "schema": {...}}`` while
``GET /schemas/{id}`` answers with ``{"schema": {...}}`` only, so the
identifier falls back to the nested descriptor's ``id``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ModelSchemaDescriptor(BaseModel):
    """The ledger's schema object (``schema`` key of a record)."""

    model_config = {"frozen": True, "extra": "allow", "populate_by_name": True}

    ver: str | None = None
    id: str | None = None
    name: str | None = None
    version: str | None = None
    attr_names: list[str] = Field(default_factory=list, alias="attrNames")
    seq_no: int | None = Field(default=None, alias="seqNo")


class ModelSchemaRecord(BaseModel):
    """A published schema as returned by the ledger."""

    model_config = {"frozen": True, "extra": "allow", "populate_by_name": True}

    schema_id: str | None = None
    descriptor: ModelSchemaDescriptor | None = Field(default=None, alias="schema")

    @model_validator(mode="after")
    def _require_identifier(self) -> ModelSchemaRecord:
        if self._find_identifier() is None:
            raise ValueError("schema record has neither schema_id nor schema.id")
        return self

    def _find_identifier(self) -> str | None:
        if self.schema_id:
            return self.schema_id
        if self.descriptor is not None and self.descriptor.id:
            return self.descriptor.id
        return None

    @property
    def identifier(self) -> str:
        """Ledger identifier: ``schema_id`` if present, else ``schema.id``."""
        return self._find_identifier() or ""

    @property
    def name(self) -> str | None:
        return self.descriptor.name if self.descriptor else None

    @property
    def version(self) -> str | None:
        return self.descriptor.version if self.descriptor else None

    @property
    def attributes(self) -> list[str]:
        return list(self.descriptor.attr_names) if self.descriptor else []

    def to_payload(self) -> dict[str, Any]:
        """Serialize back to the ledger's wire shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = ["ModelSchemaDescriptor", "ModelSchemaRecord"]
