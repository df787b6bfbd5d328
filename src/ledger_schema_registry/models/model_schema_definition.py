# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""Schema definition submitted by callers when publishing a schema."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ModelSchemaDefinition(BaseModel):
    """A new schema to publish on the ledger.

    The whole definition, including the ``default`` and ``public`` hints,
    is sent as the request body of ``POST /schemas``.

    Attributes:
        schema_name: Schema name as registered on the ledger.
        schema_version: Dotted version string, e.g. ``"1.0"``.
        attributes: Attribute names credentials issued against it carry.
        default: Store the published schema as the default schema.
        public: Store the published schema in the public table.
    """

    model_config = {"frozen": True, "extra": "forbid"}

    schema_name: str = Field(min_length=1, description="Schema name.")
    schema_version: str = Field(min_length=1, description="Schema version.")
    attributes: list[str] = Field(
        min_length=1,
        description="Attribute names of the schema.",
    )
    default: bool = Field(
        default=False,
        description="Use this schema as the issuer default.",
    )
    public: bool = Field(
        default=False,
        description="Allow unauthenticated callers to read this schema.",
    )

    @field_validator("attributes")
    @classmethod
    def _validate_attributes(cls, value: list[str]) -> list[str]:
        if any(not attr.strip() for attr in value):
            raise ValueError("attribute names must not be blank")
        if len(set(value)) != len(value):
            raise ValueError("attribute names must be unique")
        return value

    def to_request_body(self) -> dict[str, Any]:
        """Return the JSON body for ``POST /schemas``."""
        return self.model_dump(mode="json")


__all__ = ["ModelSchemaDefinition"]
