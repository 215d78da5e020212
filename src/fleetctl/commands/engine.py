"""Commands: engine and fuel operations (start, stop, fuel)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fleetctl.commands._base import FleetCommand

if TYPE_CHECKING:
    from fleetctl.commands._context import AppContext


@click.command(cls=FleetCommand, examples="  fleetctl start 3f2b...")
@click.argument("vehicle_id")
@click.pass_obj
def start(app: AppContext, vehicle_id: str) -> None:
    """Start a vehicle's engine."""
    app.emit(app.service.start_engine(vehicle_id))


@click.command(cls=FleetCommand, examples="  fleetctl stop 3f2b...")
@click.argument("vehicle_id")
@click.pass_obj
def stop(app: AppContext, vehicle_id: str) -> None:
    """Stop a vehicle's engine."""
    app.emit(app.service.stop_engine(vehicle_id))


@click.command(
    cls=FleetCommand,
    examples="""\
  fleetctl fuel 3f2b...
  fleetctl fuel 3f2b... --pumps 20""",
)
@click.argument("vehicle_id")
@click.option(
    "--pumps",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of fuel increments to pump.",
)
@click.pass_obj
def fuel(app: AppContext, vehicle_id: str, pumps: int) -> None:
    """Pump fuel into a vehicle, stopping when the tank is full."""
    app.emit(app.service.add_fuel(vehicle_id, pumps=pumps))
