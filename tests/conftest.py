"""Shared pytest fixtures and test helpers for rovercli tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from typing import Any

import httpx
import pytest
from click.testing import CliRunner

from rovercli.infrastructure.client import RoverApiClient
from rovercli.services.telemetry import disable_telemetry

BASE_URL = "http://rover.test"

SINGLE_MOTOR_CONFIG: dict[str, Any] = {
    "motors": [
        {"name": "drive", "kv_rating": 100, "wheel": {"diameter": 0.1, "gear_ratio": 5}},
    ],
    "batteries": [{"max_voltage": 12}],
}

EXERCISE = {"fixed_distance": {"value": 10}}


class FakeRoverApi:
    """In-memory stand-in for the rover-control service.

    ``routes`` maps ``(method, path)`` to an ``httpx.Response`` factory;
    every request seen is kept in ``requests``.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Any] = {}
        self.set_health(418)
        self.set_json("GET", "/rover/config", SINGLE_MOTOR_CONFIG)
        self.set_json("GET", "/exercises", EXERCISE)
        self.set_text("POST", "/verify/fixed_distance", "Success! The rover moved 10m.")

    def set_health(self, status: int) -> None:
        self.routes[("GET", "/health")] = lambda: httpx.Response(status)

    def set_json(self, method: str, path: str, body: Any, status: int = 200) -> None:
        self.routes[(method, path)] = lambda: httpx.Response(status, json=body)

    def set_text(self, method: str, path: str, text: str, status: int = 200) -> None:
        self.routes[(method, path)] = lambda: httpx.Response(status, text=text)

    def fail(self, method: str, path: str) -> None:
        """Make *path* raise a connection error."""

        def _raise() -> httpx.Response:
            raise httpx.ConnectError("connection refused")

        self.routes[(method, path)] = _raise

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        factory = self.routes.get((request.method, request.url.path))
        if factory is None:
            return httpx.Response(404, text="not found")
        return factory()

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def posted_command(self) -> dict[str, Any]:
        (request,) = self.calls("POST", "/verify/fixed_distance")
        return json.loads(request.content)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure logging onto CliRunner streams; undo that."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    rover = logging.getLogger("rovercli")
    rover_level = rover.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    rover.setLevel(rover_level)


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """--verbose turns telemetry on for the calling context; turn it back off."""
    yield
    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def rover_api() -> FakeRoverApi:
    return FakeRoverApi()


@pytest.fixture
def client(rover_api: FakeRoverApi) -> Generator[RoverApiClient]:
    """RoverApiClient wired to the fake service."""
    c = RoverApiClient(BASE_URL, transport=httpx.MockTransport(rover_api.handler))
    try:
        yield c
    finally:
        c.close()


@pytest.fixture
def mock_api(rover_api: FakeRoverApi, monkeypatch: pytest.MonkeyPatch) -> FakeRoverApi:
    """Route every client the CLI builds to the fake service."""

    def _from_settings(cls: type[RoverApiClient], settings: Any) -> RoverApiClient:
        return cls(
            settings.api.endpoint,
            timeout=settings.api.timeout,
            transport=httpx.MockTransport(rover_api.handler),
        )

    monkeypatch.setattr(RoverApiClient, "from_settings", classmethod(_from_settings))
    return rover_api


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def motor(name: str, kv: float, diameter: float = 0.1, gear_ratio: float = 5.0) -> dict[str, Any]:
    """Wire-format motor dict."""
    return {
        "name": name,
        "kv_rating": kv,
        "wheel": {"diameter": diameter, "gear_ratio": gear_ratio},
    }
