"""
Pytest configuration and fixtures for ledger_schema_registry tests.

HTTP traffic is simulated with httpx.MockTransport; no agent is needed.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from ledger_schema_registry.clients.schema_registry_client import (
    SchemaRegistryClient,
    reset_schema_registry_client,
)
from ledger_schema_registry.models.model_ledger_admin_config import (
    ModelLedgerAdminConfig,
)

ADMIN_URL = "http://agent.test:8024"

# =========================================================================
# Sample Data Fixtures
# =========================================================================


@pytest.fixture
def schema_id() -> str:
    """Ledger id in the Indy ``<did>:2:<name>:<version>`` shape."""
    return "WgWxqztrNooG92RXvxSTWv:2:identity:1.0"


@pytest.fixture
def descriptor_payload(schema_id: str) -> dict[str, Any]:
    return {
        "ver": "1.0",
        "id": schema_id,
        "name": "identity",
        "version": "1.0",
        "attrNames": ["name", "email"],
        "seqNo": 10,
    }


@pytest.fixture
def published_payload(
    schema_id: str, descriptor_payload: dict[str, Any]
) -> dict[str, Any]:
    """Body of a POST /schemas answer."""
    return {"schema_id": schema_id, "schema": descriptor_payload}


@pytest.fixture
def fetched_payload(descriptor_payload: dict[str, Any]) -> dict[str, Any]:
    """Body of a GET /schemas/{id} answer."""
    return {"schema": descriptor_payload}


# =========================================================================
# Client Fixtures
# =========================================================================


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture
def admin_config() -> ModelLedgerAdminConfig:
    return ModelLedgerAdminConfig(admin_url=ADMIN_URL, api_key="s3cr3t")


@pytest.fixture
def make_client(
    admin_config: ModelLedgerAdminConfig,
) -> Callable[..., tuple[SchemaRegistryClient, RecordingTransport]]:
    """Build a client whose requests are answered by ``handler``."""

    def _make(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> tuple[SchemaRegistryClient, RecordingTransport]:
        transport = RecordingTransport(handler)
        return SchemaRegistryClient(admin_config, transport=transport), transport

    return _make


@pytest.fixture
def respond_json() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Handler factory answering every request with one JSON body."""

    def _respond(
        body: Any, status_code: int = 200
    ) -> Callable[[httpx.Request], httpx.Response]:
        def _handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, json=body)

        return _handler

    return _respond


@pytest.fixture(autouse=True)
def _reset_shared_client() -> Any:
    """Keep the process-wide client from leaking between tests."""
    reset_schema_registry_client()
    yield
    reset_schema_registry_client()
