"""Error taxonomy shared by the client, the solver, and the service layer.

``TransportError`` covers anything between us and a parsed response.
``InputValidationError`` covers missing or out-of-domain inputs to the solver.
``ComputationError`` is an input problem only noticed once the numbers are in.
"""

from __future__ import annotations


class RoverError(Exception):
    """Base error carrying a stable ``code`` and the offending ``field``."""

    def __init__(self, code: str, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.field = field


class TransportError(RoverError):
    """Network failure, non-OK status, or an unparseable response body."""


class InputValidationError(RoverError):
    """A required field is missing or outside its physical domain."""


class ComputationError(InputValidationError):
    """A derived quantity came out non-finite or non-positive."""
