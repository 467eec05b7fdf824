"""Command: drive the rover the exercise's fixed distance."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rovercli.commands._base import RoverCommand

if TYPE_CHECKING:
    from rovercli.commands._context import AppContext


@click.command(
    "fixed-distance",
    cls=RoverCommand,
    examples="""\
  rovercli fixed-distance
  rovercli fixed-distance --dry-run
  rovercli --json fixed-distance
  rovercli -v fixed-distance""",
)
@click.option("--dry-run", is_flag=True, help="Compute the command without submitting it.")
@click.pass_obj
def fixed_distance(app: AppContext, dry_run: bool) -> None:
    """Moves the rover by the fixed distance from the exercise endpoint."""
    from rovercli.services.rover import RoverService

    app.emit(RoverService(app.client).fixed_distance(dry_run=dry_run))
