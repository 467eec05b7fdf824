"""Subcommand modules for rovercli.

Provides register_commands() which uses deferred imports to keep
``rovercli --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from rovercli.commands.exercise import exercise
    from rovercli.commands.fixed_distance import fixed_distance
    from rovercli.commands.health import health
    from rovercli.commands.rover import rover

    cli.add_command(health)
    cli.add_command(rover)
    cli.add_command(exercise)
    cli.add_command(fixed_distance)
