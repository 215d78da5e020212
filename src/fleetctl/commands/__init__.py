"""Subcommand modules for fleetctl.

Provides register_commands() which uses deferred imports to keep
``fleetctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    # --- Fleet ---
    from fleetctl.commands.vehicles import add, list_cmd, needs_fuel, preset, running, show

    cli.add_command(add)
    cli.add_command(preset)
    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(needs_fuel)
    cli.add_command(running)

    # --- Engine and fuel ---
    from fleetctl.commands.engine import fuel, start, stop

    cli.add_command(fuel)
    cli.add_command(start)
    cli.add_command(stop)

    # --- Session ---
    from fleetctl.commands.shell import shell

    cli.add_command(shell)
