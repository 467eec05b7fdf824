"""HTTP adapters for the rover-control API.

One :class:`RoverApiClient` per invocation, bound to an explicit base URL.
Fetch failures surface as :class:`~rovercli.domain.errors.TransportError`,
except a response body missing a required field, which is an
:class:`~rovercli.domain.errors.InputValidationError`. Nothing is retried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from rovercli.domain.errors import InputValidationError, TransportError
from rovercli.domain.exercise import ExerciseSpec
from rovercli.domain.hardware import HardwareModel

if TYPE_CHECKING:
    from types import TracebackType

    from rovercli.config.settings import RoverSettings
    from rovercli.domain.command import MotionCommand

logger = logging.getLogger(__name__)

# The health endpoint reports success as "418 I'm a teapot". Anything else,
# including 200, is unhealthy.
HEALTHY_STATUS = 418

HEALTH_PATH = "/health"
ROVER_CONFIG_PATH = "/rover/config"
EXERCISES_PATH = "/exercises"
VERIFY_FIXED_DISTANCE_PATH = "/verify/fixed_distance"

_M = TypeVar("_M", bound=BaseModel)


@dataclass(frozen=True)
class HealthStatus:
    """Outcome of ``GET /health``."""

    status_code: int
    reason: str

    @property
    def healthy(self) -> bool:
        return self.status_code == HEALTHY_STATUS


@dataclass(frozen=True)
class VerifyResponse:
    """Raw answer from the verification endpoint, left uninterpreted."""

    status_code: int
    text: str


class RoverApiClient:
    """Typed client for the four rover-control endpoints.

    Parameters:
        base_url: API root, e.g. ``http://localhost:8080``.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._http = httpx.Client(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: RoverSettings) -> RoverApiClient:
        """Build a client from the ``[api]`` settings section."""
        return cls(settings.api.endpoint, timeout=settings.api.timeout)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> RoverApiClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    def check_health(self) -> HealthStatus:
        """``GET /health``. Only a 418 counts as healthy."""
        response = self._send("GET", HEALTH_PATH)
        return HealthStatus(status_code=response.status_code, reason=response.reason_phrase)

    def get_rover_config(self) -> HardwareModel:
        """``GET /rover/config`` parsed into a :class:`HardwareModel`."""
        return self._get_model(ROVER_CONFIG_PATH, HardwareModel, what="rover config")

    def get_exercise(self) -> ExerciseSpec:
        """``GET /exercises`` parsed into an :class:`ExerciseSpec`."""
        return self._get_model(EXERCISES_PATH, ExerciseSpec, what="exercise data")

    def verify_fixed_distance(self, command: MotionCommand) -> VerifyResponse:
        """``POST /verify/fixed_distance`` with *command* as a JSON body.

        The response status is not checked; the body comes back verbatim.
        """
        response = self._send(
            "POST",
            VERIFY_FIXED_DISTANCE_PATH,
            json=command.to_payload(),
            headers={"Content-Type": "application/json"},
        )
        return VerifyResponse(status_code=response.status_code, text=response.text)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s%s", method, self.base_url, path)
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise TransportError(
                "HTTP_ERROR",
                f"{method} {path} failed: {exc}",
            ) from exc
        logger.debug("%s %s -> %d", method, path, response.status_code)
        return response

    def _get_model(self, path: str, model: type[_M], *, what: str) -> _M:
        response = self._send("GET", path)
        if not response.is_success:
            raise TransportError(
                "HTTP_STATUS",
                f"Error fetching {what}: {response.status_code} {response.reason_phrase}",
            )
        try:
            return model.model_validate_json(response.content)
        except PydanticValidationError as exc:
            first = exc.errors()[0]
            field = _dotted(first["loc"]) or None
            if first["type"] == "missing":
                raise InputValidationError(
                    "MISSING_FIELD", f"{field} not found in {what}", field=field
                ) from exc
            where = f" at {field}" if field else ""
            raise TransportError(
                "INVALID_RESPONSE",
                f"Error parsing {what}{where}: {first['msg']}",
                field=field,
            ) from exc


def _dotted(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as ``motors[0].wheel.diameter``."""
    out = ""
    for part in loc:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else part
    return out
