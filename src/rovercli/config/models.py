"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rovercli.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_API_ENDPOINT = "http://localhost:8080"


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    endpoint: str = DEFAULT_API_ENDPOINT
    timeout: float = Field(default=10.0, gt=0)
