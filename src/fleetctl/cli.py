"""Root CLI group for fleetctl with global flags and command registration."""

from __future__ import annotations

import click

from fleetctl import __version__
from fleetctl.commands import register_commands
from fleetctl.commands._base import FleetGroup
from fleetctl.commands._context import AppContext
from fleetctl.config.settings import FleetSettings


@click.group(
    cls=FleetGroup,
    invoke_without_command=True,
    examples="""\
  fleetctl add car Ford Mustang --color Red
  fleetctl preset --list
  printf 'preset mustang\\nlist\\n' | fleetctl shell""",
)
@click.version_option(version=__version__, prog_name="fleetctl")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only IDs, or one ERROR line on failure.")
@click.option("-v", "--verbose", is_flag=True, help="Show extra fields and debug logs.")
@click.option("--log-json", is_flag=True, help="Write log lines to stderr as JSON.")
@click.option("-c", "--config", "config_path", default=None, help="Read settings from this TOML file.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """fleetctl — engine and fuel control for an in-memory vehicle fleet.

    Vehicles live only as long as the process.  Use ``fleetctl shell`` to
    run several commands against the same fleet.
    """
    settings = FleetSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
