"""BaseService — foundation for rovercli services.

Every service receives a :class:`RoverApiClient` at construction time and
never builds its own, so the API endpoint stays an injected value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rovercli.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from rovercli.domain.errors import RoverError
    from rovercli.infrastructure.client import RoverApiClient


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RoverService(BaseService):
            def health(self) -> ServiceResult:
                status = self._client.check_health()
                ...
    """

    def __init__(self, client: RoverApiClient) -> None:
        self._client = client

    @staticmethod
    def _failure(
        op: str,
        exc: RoverError,
        *,
        data: dict | None = None,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """Wrap a caught RoverError as a failed ServiceResult."""
        return ServiceResult(
            ok=False,
            op=op,
            data=data or {},
            warnings=warnings or [],
            error=ServiceError.from_exception(exc),
        )
