# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""In-memory tables of schemas known to the issuer.

A ``SchemaRegistry`` holds two ``SchemaCache`` tables: every schema the
client has published or fetched, and the subset unauthenticated callers
may use. Each table keeps its default schema in a dedicated slot rather
than under a reserved key, so a ledger id spelled ``"default"`` is stored
like any other id.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ledger_schema_registry.models.model_schema_record import ModelSchemaRecord

logger = logging.getLogger(__name__)


class SchemaCache:
    """Schemas keyed by identifier plus an optional default."""

    def __init__(self, label: str = "schemas") -> None:
        self.label = label
        self._by_id: dict[str, ModelSchemaRecord] = {}
        self._default_id: str | None = None

    @property
    def default_id(self) -> str | None:
        return self._default_id

    @property
    def default(self) -> ModelSchemaRecord | None:
        """The default schema, or None if none was set."""
        if self._default_id is None:
            return None
        return self._by_id.get(self._default_id)

    def put(self, record: ModelSchemaRecord, *, make_default: bool = False) -> None:
        """Insert or replace ``record`` under its identifier."""
        schema_id = record.identifier
        self._by_id[schema_id] = record
        if make_default:
            self._default_id = schema_id
            logger.info("Schema %s stored as [default] in %s", schema_id, self.label)

    def get(self, schema_id: str) -> ModelSchemaRecord | None:
        return self._by_id.get(schema_id)

    def ids(self) -> list[str]:
        return list(self._by_id)

    def __contains__(self, schema_id: object) -> bool:
        return schema_id in self._by_id

    def __iter__(self) -> Iterator[ModelSchemaRecord]:
        return iter(list(self._by_id.values()))

    def __len__(self) -> int:
        return len(self._by_id)

    def __repr__(self) -> str:
        return (
            f"SchemaCache(label={self.label!r}, size={len(self)}, "
            f"default_id={self._default_id!r})"
        )


class SchemaRegistry:
    """The issuer's schema tables: all known schemas and the public subset.

    Invariants maintained by ``store``:
        - a public record is present in both tables under the same id
        - a default record is the default of ``all``, and also of ``public``
          when it is public too
    """

    def __init__(self) -> None:
        self.all = SchemaCache("schemas")
        self.public = SchemaCache("public-schemas")

    def store(
        self,
        record: ModelSchemaRecord,
        *,
        is_default: bool = False,
        is_public: bool = False,
    ) -> ModelSchemaRecord:
        """Record a schema, honoring the default and public flags."""
        self.all.put(record, make_default=is_default)
        if is_public:
            self.public.put(record, make_default=is_default)
            logger.info("Schema %s stored as [public]", record.identifier)
        logger.debug(
            "Stored schema %s (default=%s, public=%s)",
            record.identifier,
            is_default,
            is_public,
        )
        return record

    def __repr__(self) -> str:
        return f"SchemaRegistry(all={self.all!r}, public={self.public!r})"


__all__ = ["SchemaCache", "SchemaRegistry"]
