"""Tests for the format_result dispatcher and OutputSettings."""

import json

from rovercli.output.formatters import OutputSettings, format_result
from rovercli.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResult:
    def test_json_mode(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_ok("health", status_code=418), settings=settings)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["status_code"] == 418

    def test_json_mode_error(self) -> None:
        output = format_result(_err("health", "Bad"), settings=OutputSettings(json_output=True))
        assert json.loads(output)["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_ok(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "test"

    def test_quiet_mode(self) -> None:
        assert format_result(_ok("health"), settings=OutputSettings(quiet=True)) == "OK: health"

    def test_quiet_mode_error(self) -> None:
        output = format_result(_err("exercise", "nope"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: exercise — nope"

    def test_default_is_rich(self) -> None:
        output = format_result(_ok("test", key="val"))
        assert "OK" in output
        assert "key: val" in output
