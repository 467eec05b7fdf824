"""Command: show current exercise parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rovercli.commands._base import RoverCommand

if TYPE_CHECKING:
    from rovercli.commands._context import AppContext


@click.command(
    cls=RoverCommand,
    examples="""\
  rovercli exercise
  rovercli --json exercise""",
)
@click.pass_obj
def exercise(app: AppContext) -> None:
    """Fetches the exercise data from the API."""
    from rovercli.services.rover import RoverService

    app.emit(RoverService(app.client).exercise())
