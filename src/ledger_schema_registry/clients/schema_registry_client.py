# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""Async client for schema operations on a ledger agent's admin API.

Publishes and fetches schemas, lists the schema ids the agent created, and
accepts the ledger's Transaction Author Agreement. Every schema that comes
back from the ledger is recorded in a ``SchemaRegistry`` so the issuer can
look it up later without another round trip.

Endpoints (relative to ``ModelLedgerAdminConfig.admin_url``):
    POST /ledger/taa/accept
    POST /schemas
    GET  /schemas/created
    GET  /schemas/{schema_id}

The client performs no retries. Transport failures and non-2xx statuses
surface as the httpx exceptions that caused them.

Example:
    ```python
    from ledger_schema_registry import ModelLedgerAdminConfig, SchemaRegistryClient

    config = ModelLedgerAdminConfig(admin_url="http://localhost:8024")
    async with SchemaRegistryClient(config) as client:
        record = await client.fetch_schema(schema_id, is_default=True)
        assert client.get_default_schema() == record
    ```
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import ValidationError

from ledger_schema_registry.models.model_ledger_admin_config import (
    ModelLedgerAdminConfig,
)
from ledger_schema_registry.models.model_schema_definition import (
    ModelSchemaDefinition,
)
from ledger_schema_registry.models.model_schema_record import ModelSchemaRecord
from ledger_schema_registry.models.model_taa_acceptance import ModelTaaAcceptance
from ledger_schema_registry.registry.schema_cache import SchemaRegistry

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)

_HTTP_OK = 200


class SchemaRegistryError(Exception):
    """Base exception for schema registry client errors."""


class UninitializedContextError(SchemaRegistryError):
    """Raised when the shared client is requested before it was configured."""


class SchemaNotFoundError(SchemaRegistryError):
    """Raised when the ledger has no schema for the requested id."""

    def __init__(self, schema_id: str) -> None:
        self.schema_id = schema_id
        super().__init__(
            f"Schema with id {schema_id} was not found on the ledger, the "
            "application will NOT be able to issue credentials for it"
        )


class InvalidSchemaRecordError(SchemaRegistryError):
    """Raised when a ledger response is not JSON or not the expected shape."""


class SchemaRegistryClient:
    """Async client for ledger schema operations with an in-process cache.

    Keeps a persistent httpx.AsyncClient for connection reuse. Operations
    connect on demand, so both context-manager and manual lifecycles work.

    Example (manual lifecycle):
        ```python
        client = SchemaRegistryClient(config)
        await client.connect()
        try:
            ids = await client.fetch_schema_ids(schema_name="identity")
        finally:
            await client.close()
        ```
    """

    def __init__(
        self,
        config: ModelLedgerAdminConfig,
        registry: SchemaRegistry | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._registry = registry if registry is not None else SchemaRegistry()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def config(self) -> ModelLedgerAdminConfig:
        """Return the client configuration."""
        return self._config

    @property
    def registry(self) -> SchemaRegistry:
        """The schema tables filled by publish and fetch."""
        return self._registry

    @property
    def is_connected(self) -> bool:
        """True if the connection pool is active."""
        return self._client is not None

    @property
    def admin_url(self) -> str:
        """Admin API base URL without a trailing slash."""
        return self._config.admin_url

    async def connect(self) -> None:
        """Open the connection pool. Safe to call multiple times (idempotent)."""
        if self._client is not None:
            return
        self._client = httpx.AsyncClient(
            headers=self._config.request_headers(),
            timeout=httpx.Timeout(self._config.timeout_seconds),
            transport=self._transport,
        )
        logger.debug("SchemaRegistryClient connected to %s", self.admin_url)

    async def close(self) -> None:
        """Close the connection pool. Safe to call multiple times (idempotent)."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("SchemaRegistryClient connection closed")

    async def __aenter__(self) -> SchemaRegistryClient:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            await self.connect()
        if self._client is None:
            raise SchemaRegistryError("Client is not connected")
        return self._client

    # ------------------------------------------------------------------
    # Ledger operations
    # ------------------------------------------------------------------

    async def sign_agreement(self) -> bool:
        """Accept the ledger's Transaction Author Agreement.

        Returns:
            True if the agent answered 200, False for any other status.

        Raises:
            httpx.TransportError: If the request could not be completed.
        """
        body = ModelTaaAcceptance().model_dump()
        logger.debug("Signing TAA version %s", body["version"])
        client = await self._http()
        response = await client.post(f"{self.admin_url}/ledger/taa/accept", json=body)
        logger.debug(
            "TAA acceptance response: status=%d body=%s",
            response.status_code,
            response.text,
        )
        if response.status_code != _HTTP_OK:
            logger.warning("TAA not accepted: status %d", response.status_code)
            return False
        return True

    async def publish_schema(
        self, definition: ModelSchemaDefinition
    ) -> ModelSchemaRecord:
        """Publish a schema and record the ledger's answer.

        The record is stored under its ledger id, as default when
        ``definition.default`` is set, and in the public table when
        ``definition.public`` is set.

        Raises:
            InvalidSchemaRecordError: If the response is not a schema record.
            httpx.HTTPStatusError: If the agent answers with a non-2xx status.
        """
        body = definition.to_request_body()
        logger.debug("Publishing schema to ledger: %s", body)
        client = await self._http()
        response = await client.post(f"{self.admin_url}/schemas", json=body)
        response.raise_for_status()
        data = self._read_json(response)
        logger.debug("Published schema: %s", data)

        record = self._parse_record(data)
        return self._registry.store(
            record, is_default=definition.default, is_public=definition.public
        )

    async def fetch_schema_ids(
        self,
        schema_name: str | None = None,
        schema_version: str | None = None,
    ) -> list[str]:
        """Find ids of schemas this agent created, filtered by name and version.

        Only the filters that are given are sent as query parameters.

        Raises:
            InvalidSchemaRecordError: If the body is not a JSON object.
            httpx.HTTPStatusError: If the agent answers with a non-2xx status.
        """
        params: dict[str, str] = {}
        if schema_name is not None:
            params["schema_name"] = schema_name
        if schema_version is not None:
            params["schema_version"] = schema_version
        logger.debug("Fetching created schema ids with filters %s", params)

        client = await self._http()
        response = await client.get(f"{self.admin_url}/schemas/created", params=params)
        response.raise_for_status()
        data = self._read_json(response)
        logger.debug("Created schema ids: %s", data)
        if not isinstance(data, dict):
            raise InvalidSchemaRecordError(
                f"Unexpected schema id listing from ledger: {type(data).__name__}"
            )
        schema_ids: list[str] = data.get("schema_ids") or []
        return schema_ids

    async def fetch_schema(
        self,
        schema_id: str,
        is_default: bool = False,
        is_public: bool = False,
    ) -> ModelSchemaRecord:
        """Fetch a schema from the ledger and record it.

        Args:
            schema_id: Ledger id of the schema.
            is_default: Store the schema as the default schema.
            is_public: Store the schema in the public table.

        Raises:
            SchemaNotFoundError: If the response carries no schema; the
                cache is left unchanged.
            InvalidSchemaRecordError: If the response is not a schema record.
            httpx.HTTPStatusError: If the agent answers with a non-2xx status.
        """
        logger.debug("Fetching schema with id %s from ledger.", schema_id)
        client = await self._http()
        response = await client.get(f"{self.admin_url}/schemas/{schema_id}")
        response.raise_for_status()
        data = self._read_json(response)

        if not isinstance(data, dict) or not data.get("schema"):
            raise SchemaNotFoundError(schema_id)

        logger.debug("Fetched schema: %s", data)
        record = self._parse_record(data)
        return self._registry.store(record, is_default=is_default, is_public=is_public)

    # ------------------------------------------------------------------
    # Cache reads
    # ------------------------------------------------------------------

    def get_schema(self, schema_id: str) -> ModelSchemaRecord | None:
        """Cached schema for ``schema_id``, or None."""
        return self._registry.all.get(schema_id)

    def get_default_schema(self) -> ModelSchemaRecord | None:
        """Cached default schema, or None."""
        return self._registry.all.default

    def get_public_schema(self, schema_id: str) -> ModelSchemaRecord | None:
        """Cached public schema for ``schema_id``, or None."""
        return self._registry.public.get(schema_id)

    def get_default_public_schema(self) -> ModelSchemaRecord | None:
        """Cached default public schema, or None."""
        return self._registry.public.default

    @staticmethod
    def _read_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise InvalidSchemaRecordError(
                f"Ledger answered {response.status_code} with a non-JSON body"
            ) from exc

    @staticmethod
    def _parse_record(data: Any) -> ModelSchemaRecord:
        try:
            return ModelSchemaRecord.model_validate(data)
        except ValidationError as exc:
            raise InvalidSchemaRecordError(
                f"Unexpected schema response from ledger: {exc}"
            ) from exc


# ----------------------------------------------------------------------
# Process-wide instance
# ----------------------------------------------------------------------

_shared_client: SchemaRegistryClient | None = None


def get_schema_registry_client(
    config: ModelLedgerAdminConfig | None = None,
) -> SchemaRegistryClient:
    """Return the process-wide client, creating it on first use.

    Only the first call needs ``config``; later calls return the same
    instance and ignore the argument.

    Raises:
        UninitializedContextError: If the client does not exist yet and no
            config was given.
    """
    global _shared_client
    if _shared_client is None:
        if config is None:
            raise UninitializedContextError(
                "Error creating a new instance of [SchemaRegistryClient]: "
                "no config was provided"
            )
        _shared_client = SchemaRegistryClient(config)
        logger.debug("Created new instance of [SchemaRegistryClient]")
    return _shared_client


def reset_schema_registry_client() -> SchemaRegistryClient | None:
    """Forget the process-wide client and return it so callers can close it."""
    global _shared_client
    previous, _shared_client = _shared_client, None
    return previous


__all__ = [
    "InvalidSchemaRecordError",
    "SchemaNotFoundError",
    "SchemaRegistryClient",
    "SchemaRegistryError",
    "UninitializedContextError",
    "get_schema_registry_client",
    "reset_schema_registry_client",
]
