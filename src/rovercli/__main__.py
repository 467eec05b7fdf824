from rovercli.cli import cli

cli()
