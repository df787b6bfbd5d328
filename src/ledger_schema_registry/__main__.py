# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Ledger Schema Registry Authors
"""
Ledger schema CLI.

Runs one schema operation against the agent admin API configured through
LEDGER_ADMIN_* environment variables and prints the result as JSON.

Usage:
    python -m ledger_schema_registry accept-taa
    python -m ledger_schema_registry publish --name identity --version 1.0 \
        --attribute name --attribute email --default --public
    python -m ledger_schema_registry list-ids --name identity
    python -m ledger_schema_registry fetch <schema_id>

Environment Variables:
    LEDGER_ADMIN_URL: Base URL of the agent admin API (required)
    LEDGER_ADMIN_API_KEY: Admin API key (optional)
    LOG_LEVEL: Logging level (default: WARNING)

Exit Codes:
    0 - Success
    1 - Domain failure: schema not found or TAA not accepted
    2 - Error: usage, configuration, or transport failure
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Any

import httpx
from pydantic import ValidationError

from ledger_schema_registry.clients.schema_registry_client import (
    SchemaNotFoundError,
    SchemaRegistryClient,
    SchemaRegistryError,
)
from ledger_schema_registry.models.model_ledger_admin_config import (
    ModelLedgerAdminConfig,
)
from ledger_schema_registry.models.model_schema_definition import (
    ModelSchemaDefinition,
)
from ledger_schema_registry.settings import LedgerAdminSettings

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_ERROR = 2

JSON_INDENT_SPACES = 2

logger = logging.getLogger(__name__)


def _get_log_level() -> int:
    """Get log level from environment with safe fallback."""
    level_name = os.getenv("LOG_LEVEL", "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m ledger_schema_registry",
        description="Publish and fetch schemas through a ledger agent admin API.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("accept-taa", help="Accept the Transaction Author Agreement")

    publish = sub.add_parser("publish", help="Publish a new schema")
    publish.add_argument("--name", required=True, help="Schema name")
    publish.add_argument("--version", required=True, help="Schema version")
    publish.add_argument(
        "--attribute",
        dest="attributes",
        action="append",
        required=True,
        help="Attribute name (repeatable)",
    )
    publish.add_argument("--default", action="store_true", help="Mark as default")
    publish.add_argument("--public", action="store_true", help="Mark as public")

    list_ids = sub.add_parser("list-ids", help="List ids of created schemas")
    list_ids.add_argument("--name", default=None, help="Filter by schema name")
    list_ids.add_argument("--version", default=None, help="Filter by schema version")

    fetch = sub.add_parser("fetch", help="Fetch a schema by id")
    fetch.add_argument("schema_id", help="Ledger schema id")

    return parser


async def run_command(
    args: argparse.Namespace, client: SchemaRegistryClient
) -> tuple[int, Any]:
    """Execute the parsed command. Returns (exit_code, json_payload)."""
    if args.command == "accept-taa":
        accepted = await client.sign_agreement()
        return (EXIT_OK if accepted else EXIT_FAILURE), {"accepted": accepted}

    if args.command == "publish":
        definition = ModelSchemaDefinition(
            schema_name=args.name,
            schema_version=args.version,
            attributes=args.attributes,
            default=args.default,
            public=args.public,
        )
        record = await client.publish_schema(definition)
        return EXIT_OK, record.to_payload()

    if args.command == "list-ids":
        ids = await client.fetch_schema_ids(args.name, args.version)
        return EXIT_OK, {"schema_ids": ids}

    if args.command == "fetch":
        try:
            record = await client.fetch_schema(args.schema_id)
        except SchemaNotFoundError as exc:
            return EXIT_FAILURE, {"error": str(exc), "schema_id": exc.schema_id}
        return EXIT_OK, record.to_payload()

    raise ValueError(f"Unknown command: {args.command}")


async def _run(
    args: argparse.Namespace,
    config: ModelLedgerAdminConfig,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    async with SchemaRegistryClient(config, transport=transport) as client:
        exit_code, payload = await run_command(args, client)
    print(json.dumps(payload, indent=JSON_INDENT_SPACES))
    return exit_code


def main(
    argv: list[str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    """Run the CLI. ``transport`` replaces the default httpx transport."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=_get_log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        config = LedgerAdminSettings().to_client_config()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_ERROR

    try:
        return asyncio.run(_run(args, config, transport))
    except ValidationError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except (httpx.HTTPError, SchemaRegistryError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
