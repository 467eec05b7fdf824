"""Command: show rover hardware configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rovercli.commands._base import RoverCommand

if TYPE_CHECKING:
    from rovercli.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  rovercli rover
  rovercli --json rover""",
)
@click.pass_obj
def rover(app: AppContext) -> None:
    """Fetches the rover config from the API."""
    from rovercli.services.rover import RoverService

    app.emit(RoverService(app.client).rover_config())
