"""Rover hardware configuration as served by ``GET /rover/config``.

Fields are typed but not range-checked here; positivity is enforced by
:mod:`rovercli.domain.kinematics` so each violation gets its own error.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Wheel(BaseModel):
    """Wheel geometry and the gearbox between it and its motor."""

    model_config = {"frozen": True}

    diameter: float
    gear_ratio: float


class Motor(BaseModel):
    """A drive motor with its velocity constant (RPM per volt)."""

    model_config = {"frozen": True}

    name: str
    kv_rating: float
    wheel: Wheel


class Battery(BaseModel):
    """[batteries] entry."""

    model_config = {"frozen": True}

    max_voltage: float


class HardwareModel(BaseModel):
    """Full rover configuration: ordered motors and batteries."""

    model_config = {"frozen": True}

    motors: list[Motor] = Field(default_factory=list)
    batteries: list[Battery] = Field(default_factory=list)
