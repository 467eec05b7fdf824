"""``rovercli`` entry point: global flags, settings, and the subcommand group."""

from __future__ import annotations

import click

from rovercli import __version__
from rovercli.commands import register_commands
from rovercli.commands._context import AppContext
from rovercli.config.settings import RoverSettings


@click.group(name="rovercli", invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rovercli")
@click.option(
    "--api-endpoint",
    metavar="URL",
    default=None,
    help="Rover API base URL (default http://localhost:8080).",
)
@click.option(
    "-c",
    "--config",
    "config_path",
    metavar="PATH",
    default=None,
    help="Read settings from this TOML file instead of rovercli.toml.",
)
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print one line per result.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and request timings.")
@click.option("--log-json", is_flag=True, help="Write log lines to stderr as JSON.")
@click.pass_context
def cli(
    ctx: click.Context,
    api_endpoint: str | None,
    config_path: str | None,
    **flags: bool,
) -> None:
    """rovercli: query the rover-control API and drive fixed-distance moves."""
    settings = RoverSettings.from_cli(
        config_path=config_path, api_endpoint=api_endpoint, **flags
    )
    app = ctx.obj = AppContext(settings)
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
