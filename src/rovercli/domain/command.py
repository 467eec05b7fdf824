"""MotionCommand — the body posted to ``/verify/fixed_distance``."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class MotorCommand(BaseModel):
    """Voltage to apply to one named motor."""

    model_config = {"frozen": True}

    name: str
    voltage: float


class MotionCommand(BaseModel):
    """Shared duration plus one voltage per motor, in rover motor order."""

    model_config = {"frozen": True}

    duration: float
    motor_commands: list[MotorCommand] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready wire form ``{duration, motor_commands}``."""
        return self.model_dump(mode="json")
