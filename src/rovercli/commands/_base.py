"""Shared Click command class for rovercli subcommands."""

from __future__ import annotations

from typing import Any

import click


class RoverCommand(click.Command):
    """Command with an eager ``--examples`` flag.

    ``--examples`` prints the invocations passed as *examples* and exits
    without touching the API, keeping ``--help`` short.
    """

    def __init__(self, *args: Any, examples: str = "", **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show example invocations and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)
