"""Tests for the rover and exercise CLI commands."""

from __future__ import annotations

import json

from click.testing import CliRunner

from rovercli.cli import cli
from tests.conftest import FakeRoverApi


class TestRoverCommand:
    def test_human_output(self, cli_runner: CliRunner, mock_api: FakeRoverApi) -> None:
        result = cli_runner.invoke(cli, ["rover"])
        assert result.exit_code == 0
        assert "drive" in result.output
        assert "Batteries" in result.output

    def test_json_output(self, cli_runner: CliRunner, mock_api: FakeRoverApi) -> None:
        result = cli_runner.invoke(cli, ["--json", "rover"])
        data = json.loads(result.stdout)
        assert data["op"] == "rover_config"
        assert data["data"]["motors"][0]["kv_rating"] == 100.0

    def test_server_error(self, cli_runner: CliRunner, mock_api: FakeRoverApi) -> None:
        mock_api.set_json("GET", "/rover/config", {}, status=500)
        result = cli_runner.invoke(cli, ["rover"])
        assert result.exit_code == 1
        assert "Error fetching rover config" in result.stderr


class TestExerciseCommand:
    def test_human_output(self, cli_runner: CliRunner, mock_api: FakeRoverApi) -> None:
        result = cli_runner.invoke(cli, ["exercise"])
        assert result.exit_code == 0
        assert "fixed_distance: 10.0000" in result.output

    def test_quiet(self, cli_runner: CliRunner, mock_api: FakeRoverApi) -> None:
        result = cli_runner.invoke(cli, ["-q", "exercise"])
        assert result.output.strip() == "OK: exercise"

    def test_unreachable(self, cli_runner: CliRunner, mock_api: FakeRoverApi) -> None:
        mock_api.fail("GET", "/exercises")
        result = cli_runner.invoke(cli, ["exercise"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr
