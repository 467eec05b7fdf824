"""Command: rover API health check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rovercli.commands._base import RoverCommand

if TYPE_CHECKING:
    from rovercli.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  rovercli health
  rovercli --api-endpoint http://rover.local:8080 health""",
)
@click.pass_obj
def health(app: AppContext) -> None:
    """Checks the health of the rover api."""
    from rovercli.services.rover import RoverService

    app.emit(RoverService(app.client).health())
