"""Commands: adding and inspecting vehicles (add, preset, list, show, needs-fuel, running)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fleetctl.commands._base import FleetCommand
from fleetctl.domain.types import VehicleKind

if TYPE_CHECKING:
    from fleetctl.commands._context import AppContext


@click.command(
    cls=FleetCommand,
    examples="""\
  fleetctl add car Ford Mustang --color Red
  fleetctl add motorcycle Honda CB500 --capacity 4.5 --year 2021""",
)
@click.argument("kind", type=click.Choice([k.value for k in VehicleKind]))
@click.argument("brand")
@click.argument("model")
@click.option("--color", default=None, help="Paint color (default from config, else White).")
@click.option("--capacity", type=float, default=None, help="Tank capacity (default per kind).")
@click.option("--year", type=int, default=None, help="Model year (default: current year).")
@click.pass_obj
def add(
    app: AppContext,
    kind: str,
    brand: str,
    model: str,
    color: str | None,
    capacity: float | None,
    year: int | None,
) -> None:
    """Add a new vehicle to the fleet."""
    app.emit(
        app.service.create_vehicle(
            kind, brand, model, color=color, capacity=capacity, year=year
        )
    )


@click.command(
    cls=FleetCommand,
    examples="""\
  fleetctl preset mustang
  fleetctl preset --list""",
)
@click.argument("name", required=False)
@click.option("--list", "list_presets", is_flag=True, help="List available presets.")
@click.pass_obj
def preset(app: AppContext, name: str | None, list_presets: bool) -> None:
    """Add a vehicle from a named preset."""
    if list_presets or name is None:
        app.emit(app.service.list_presets())
    else:
        app.emit(app.service.create_from_preset(name))


@click.command("list", cls=FleetCommand, examples="  fleetctl list\n  fleetctl --json list")
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List vehicles in the order they were added."""
    app.emit(app.service.list_vehicles())


@click.command(cls=FleetCommand)
@click.argument("vehicle_id")
@click.pass_obj
def show(app: AppContext, vehicle_id: str) -> None:
    """Show one vehicle's attributes, fuel and engine state."""
    app.emit(app.service.get_vehicle(vehicle_id))


@click.command("needs-fuel", cls=FleetCommand)
@click.argument("vehicle_id")
@click.pass_obj
def needs_fuel(app: AppContext, vehicle_id: str) -> None:
    """Report whether a vehicle has too little fuel to start."""
    app.emit(app.service.needs_fuel(vehicle_id))


@click.command(cls=FleetCommand)
@click.argument("vehicle_id")
@click.pass_obj
def running(app: AppContext, vehicle_id: str) -> None:
    """Report whether a vehicle's engine is on."""
    app.emit(app.service.is_engine_on(vehicle_id))
