"""Tests for the health CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from rovercli.cli import cli
from tests.conftest import FakeRoverApi


class TestHealthCommand:
    def test_teapot_is_healthy(self, cli_runner: CliRunner, mock_api: FakeRoverApi) -> None:
        result = cli_runner.invoke(cli, ["health"])
        assert result.exit_code == 0
        assert "I'm a teapot" in result.output

    @pytest.mark.parametrize("code", [200, 503])
    def test_other_status_fails(
        self, cli_runner: CliRunner, mock_api: FakeRoverApi, code: int
    ) -> None:
        mock_api.set_health(code)
        result = cli_runner.invoke(cli, ["health"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Error fetching rover api health" in result.stderr

    def test_json(self, cli_runner: CliRunner, mock_api: FakeRoverApi) -> None:
        result = cli_runner.invoke(cli, ["--json", "health"])
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"]["status_code"] == 418

    def test_api_endpoint_flag(self, cli_runner: CliRunner, mock_api: FakeRoverApi) -> None:
        cli_runner.invoke(cli, ["--api-endpoint", "http://mars.example:9000", "health"])
        assert str(mock_api.requests[0].url) == "http://mars.example:9000/health"

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["health", "--examples"])
        assert result.exit_code == 0
        assert "rovercli health" in result.output
