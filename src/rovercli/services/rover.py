"""RoverService — health, config, exercise, and fixed-distance moves.

``fixed_distance`` is the only multi-step operation: fetch the exercise and
the rover config concurrently, solve the kinematics, then submit once.
Any error aborts before anything is posted.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from rovercli.domain.errors import RoverError
from rovercli.domain.kinematics import plan_fixed_distance
from rovercli.services.base import BaseService
from rovercli.services.result import ServiceError, ServiceResult
from rovercli.services.telemetry import get_current_span, run_in_context, trace_span, traced

if TYPE_CHECKING:
    from rovercli.domain.exercise import ExerciseSpec
    from rovercli.domain.hardware import HardwareModel

logger = logging.getLogger(__name__)


class RoverService(BaseService):
    """Operations exposed by the ``rovercli`` subcommands."""

    @traced
    def health(self) -> ServiceResult:
        """Check API health; only a 418 response counts as healthy."""
        op = "health"
        try:
            with trace_span("GET /health"):
                status = self._client.check_health()
                _annotate(status=status.status_code)
        except RoverError as exc:
            return self._failure(op, exc)

        data = {
            "status_code": status.status_code,
            "reason": status.reason,
            "healthy": status.healthy,
        }
        if not status.healthy:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                error=ServiceError(
                    code="UNHEALTHY",
                    message=(
                        "Error fetching rover api health: "
                        f"{status.status_code} {status.reason}".rstrip()
                    ),
                    detail={"status_code": status.status_code},
                ),
            )
        return ServiceResult(ok=True, op=op, data=data)

    @traced
    def rover_config(self) -> ServiceResult:
        """Fetch and return the rover hardware configuration."""
        op = "rover_config"
        try:
            with trace_span("GET /rover/config"):
                hardware = self._client.get_rover_config()
        except RoverError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=hardware.model_dump(mode="json"))

    @traced
    def exercise(self) -> ServiceResult:
        """Fetch and return the current exercise parameters."""
        op = "exercise"
        try:
            with trace_span("GET /exercises"):
                spec = self._client.get_exercise()
        except RoverError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=spec.model_dump(mode="json"))

    @traced
    def fixed_distance(self, *, dry_run: bool = False) -> ServiceResult:
        """Move the rover by the exercise's fixed distance.

        Args:
            dry_run: Solve and report the command without posting it.
        """
        op = "fixed_distance"
        try:
            with ThreadPoolExecutor(max_workers=2) as pool:
                exercise_future = pool.submit(run_in_context(self._fetch_exercise))
                hardware_future = pool.submit(run_in_context(self._fetch_hardware))
                exercise = exercise_future.result()
                hardware = hardware_future.result()

            with trace_span("solve"):
                plan = plan_fixed_distance(hardware, exercise)
                _annotate(bottleneck=plan.bottleneck, speed=round(plan.final_max_wheel_speed, 4))
                logger.debug(
                    "solved: speed=%.4f bottleneck=%s", plan.final_max_wheel_speed, plan.bottleneck
                )
        except RoverError as exc:
            logger.debug("fixed_distance aborted: %s (%s)", exc.code, exc.message)
            return self._failure(op, exc)

        data: dict[str, Any] = {
            "fixed_distance": plan.fixed_distance,
            "battery_max_voltage": plan.battery_max_voltage,
            "wheel_speeds": [{"name": n, "max_speed": s} for n, s in plan.wheel_speeds],
            "final_max_wheel_speed": plan.final_max_wheel_speed,
            "bottleneck": plan.bottleneck,
            "bottleneck_index": plan.bottleneck_index,
            "command": plan.command.to_payload(),
            "submitted": False,
        }
        if dry_run:
            return ServiceResult(ok=True, op=op, data=data, warnings=plan.warnings)

        try:
            with trace_span("POST /verify/fixed_distance"):
                response = self._client.verify_fixed_distance(plan.command)
                _annotate(status=response.status_code)
        except RoverError as exc:
            return self._failure(op, exc, data=data, warnings=plan.warnings)

        data.update(
            submitted=True,
            response_status=response.status_code,
            response=response.text,
        )
        return ServiceResult(ok=True, op=op, data=data, warnings=plan.warnings)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _fetch_exercise(self) -> ExerciseSpec:
        with trace_span("GET /exercises"):
            return self._client.get_exercise()

    def _fetch_hardware(self) -> HardwareModel:
        with trace_span("GET /rover/config"):
            return self._client.get_rover_config()


def _annotate(**values: Any) -> None:
    """Record *values* on the active span; no-op without ``--verbose``."""
    span = get_current_span()
    if span is None:
        return
    for key, value in values.items():
        span.annotate(key, value)
