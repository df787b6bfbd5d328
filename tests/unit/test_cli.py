"""Unit tests for the ledger_schema_registry command line."""

from __future__ import annotations

import json

import httpx
import pytest

from ledger_schema_registry import __main__ as cli
from ledger_schema_registry.clients.schema_registry_client import SchemaRegistryClient


def _client(admin_config, handler) -> SchemaRegistryClient:
    return SchemaRegistryClient(admin_config, transport=httpx.MockTransport(handler))


@pytest.mark.unit
class TestParser:
    def test_publish_args(self):
        args = cli.build_parser().parse_args(
            [
                "publish",
                "--name",
                "identity",
                "--version",
                "1.0",
                "--attribute",
                "name",
                "--attribute",
                "email",
                "--public",
            ]
        )
        assert args.command == "publish"
        assert args.attributes == ["name", "email"]
        assert args.public is True
        assert args.default is False

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


@pytest.mark.unit
class TestRunCommand:
    @pytest.mark.asyncio
    async def test_accept_taa_failure_exit_code(self, admin_config):
        client = _client(admin_config, lambda request: httpx.Response(202, json={}))
        args = cli.build_parser().parse_args(["accept-taa"])
        async with client:
            code, payload = await cli.run_command(args, client)
        assert code == cli.EXIT_FAILURE
        assert payload == {"accepted": False}

    @pytest.mark.asyncio
    async def test_publish(self, admin_config, published_payload):
        client = _client(
            admin_config, lambda request: httpx.Response(200, json=published_payload)
        )
        args = cli.build_parser().parse_args(
            ["publish", "--name", "identity", "--version", "1.0", "--attribute", "name"]
        )
        async with client:
            code, payload = await cli.run_command(args, client)
        assert code == cli.EXIT_OK
        assert payload == published_payload

    @pytest.mark.asyncio
    async def test_list_ids(self, admin_config, schema_id):
        client = _client(
            admin_config,
            lambda request: httpx.Response(200, json={"schema_ids": [schema_id]}),
        )
        args = cli.build_parser().parse_args(["list-ids", "--name", "identity"])
        async with client:
            code, payload = await cli.run_command(args, client)
        assert code == cli.EXIT_OK
        assert payload == {"schema_ids": [schema_id]}

    @pytest.mark.asyncio
    async def test_fetch_not_found(self, admin_config, schema_id):
        client = _client(admin_config, lambda request: httpx.Response(200, json={}))
        args = cli.build_parser().parse_args(["fetch", schema_id])
        async with client:
            code, payload = await cli.run_command(args, client)
        assert code == cli.EXIT_FAILURE
        assert payload["schema_id"] == schema_id


@pytest.mark.unit
class TestMain:
    def test_missing_url_is_config_error(self, monkeypatch, capsys):
        monkeypatch.delenv("LEDGER_ADMIN_URL", raising=False)
        assert cli.main(["list-ids"]) == cli.EXIT_ERROR
        assert "Invalid configuration" in capsys.readouterr().err

    def test_prints_json(self, monkeypatch, capsys, fetched_payload, schema_id):
        monkeypatch.setenv("LEDGER_ADMIN_URL", "http://agent.test")
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json=fetched_payload)
        )

        assert cli.main(["fetch", schema_id], transport=transport) == cli.EXIT_OK
        assert json.loads(capsys.readouterr().out) == fetched_payload

    def test_transport_error_exit_code(self, monkeypatch, capsys):
        monkeypatch.setenv("LEDGER_ADMIN_URL", "http://agent.test")

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        code = cli.main(["accept-taa"], transport=httpx.MockTransport(handler))

        assert code == cli.EXIT_ERROR
        assert "connection refused" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "argv",
        [["list-ids"], ["fetch", "WgWxqztrNooG92RXvxSTWv:2:identity:1.0"]],
        ids=["list-ids", "fetch"],
    )
    def test_non_json_body_exit_code(self, monkeypatch, capsys, argv):
        monkeypatch.setenv("LEDGER_ADMIN_URL", "http://agent.test")
        transport = httpx.MockTransport(
            lambda request: httpx.Response(
                200,
                text="<html>proxy</html>",
                headers={"content-type": "text/html"},
            )
        )

        assert cli.main(argv, transport=transport) == cli.EXIT_ERROR
        assert "non-JSON" in capsys.readouterr().err
