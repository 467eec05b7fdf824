"""Per-invocation state shared by every subcommand.

The root group builds one :class:`AppContext` and hands it down through
``@click.pass_obj``. Commands ask it for the API client and give it the
ServiceResult to print.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rovercli.config.logging import configure_logging
from rovercli.output.formatters import OutputSettings, format_result
from rovercli.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from rovercli.config.settings import RoverSettings
    from rovercli.infrastructure.client import RoverApiClient
    from rovercli.services.result import ServiceResult


class AppContext:
    """Settings, output mode, and a lazily built API client.

    ``--help``, ``--version`` and ``--examples`` never construct the client,
    so they work with no rover API reachable.
    """

    def __init__(self, settings: RoverSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._client: RoverApiClient | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @property
    def client(self) -> RoverApiClient:
        if self._client is None:
            from rovercli.infrastructure.client import RoverApiClient

            self._client = RoverApiClient.from_settings(self.settings)
        return self._client

    def close(self) -> None:
        """Release the HTTP connection pool, if one was opened."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and end the process with exit code 1 if it failed.

        Successful output goes to stdout so it can be piped; failures and
        ``WARNING:`` lines go to stderr. JSON output carries its warnings
        inline and skips the stderr lines.
        """
        if result.warnings and not self.output.json_output:
            click.echo("\n".join(f"WARNING: {w}" for w in result.warnings), err=True)
        click.echo(format_result(result, settings=self.output), err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
