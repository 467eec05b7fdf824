"""Exercise parameters as served by ``GET /exercises``."""

from __future__ import annotations

from pydantic import BaseModel


class FixedDistance(BaseModel):
    """Target travel distance. ``value`` may be missing on the wire."""

    model_config = {"frozen": True}

    value: float | None = None


class ExerciseSpec(BaseModel):
    """Requested exercise; ``fixed_distance`` may be missing on the wire."""

    model_config = {"frozen": True}

    fixed_distance: FixedDistance | None = None
