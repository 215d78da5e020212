"""Human-readable rendering of ServiceResult.

:func:`render_result` picks a renderer from ``_OP_RENDERERS`` by
``result.op``: single vehicles print as indented fields, listings as
tables.  Ops without an entry print their data as plain ``key: value``
lines.  :func:`render_quiet` is the one-line-per-item form behind ``-q``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from fleetctl.output.console import create_console, engine_style, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from fleetctl.services.result import ServiceResult


# Yes/no queries answer with their flag rather than the vehicle id.
_QUIET_FLAGS = {"needs_fuel": "needs_fuel", "is_engine_on": "engine_on"}


# ── Entry points ──────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Draw *result* on a scratch console and return the text."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal ``-q`` text.

    IDs (or preset names) one per line, ``true``/``false`` for yes/no
    queries, ``ERROR: op — message`` on failure.
    """
    if not result.ok:
        message = result.error.message if result.error else "unknown error"
        return f"ERROR: {result.op} — {message}"

    flag = _QUIET_FLAGS.get(result.op)
    if flag is not None and flag in result.data:
        return "true" if result.data[flag] else "false"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(filter(None, map(_item_key, items)))

    if "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Building blocks ───────────────────────────────────────────────────


def _item_key(item: Any) -> str:
    """A listing row's vehicle id, or its name for presets."""
    if not isinstance(item, dict):
        return ""
    key = item.get("id", item.get("name"))
    return "" if key is None else str(key)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    console.print(Text.assemble(("OK", "fleet.ok"), (f"  {result.op}", "fleet.op")))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    if key == "id":
        style = "fleet.id"
    console.print(Text.assemble((f"  {key}: ", "fleet.key"), (str(value), style)))


def _fuel_text(item: dict[str, Any]) -> str:
    level = float(item.get("fuel_level", 0.0))
    capacity = float(item.get("fuel_capacity", 0.0))
    return f"{level:.2f} / {capacity:.2f}"


def _engine_text(engine_on: bool) -> Text:
    return Text("on" if engine_on else "off", style=engine_style(engine_on))


# ── Vehicle renderers ─────────────────────────────────────────────────


def _render_vehicle(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """One vehicle: identity, attributes, fuel and engine state."""
    data = result.data
    _status_line(console, result)
    _field(console, "id", data.get("id", ""))
    _field(
        console,
        "vehicle",
        f"{data.get('brand', '')} {data.get('model', '')} ({data.get('kind', '')})",
        style="fleet.vehicle",
    )
    _field(console, "color", data.get("color", ""))
    _field(console, "year", data.get("year", ""))
    if verbose:
        _field(console, "tires", data.get("tires", ""))
    fuel_style = "fleet.fuel.low" if data.get("needs_fuel") else ""
    _field(console, "fuel", _fuel_text(data), style=fuel_style)
    engine_on = bool(data.get("engine_on"))
    _field(console, "engine", "on" if engine_on else "off", style=engine_style(engine_on))
    if "pumps_applied" in data:
        _field(console, "pumps_applied", data["pumps_applied"])
    if "preset" in data:
        _field(console, "preset", data["preset"])


def _render_vehicle_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    """All vehicles in insertion order."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    _status_line(console, result)
    if not items:
        console.print(Text("  No vehicles.", style="dim"))
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="fleet.id", no_wrap=True)
    table.add_column("Vehicle", style="fleet.vehicle")
    table.add_column("Kind")
    table.add_column("Color")
    if verbose:
        table.add_column("Year")
        table.add_column("Tires", justify="right")
    table.add_column("Fuel", justify="right")
    table.add_column("Engine")

    for item in items:
        row: list[str | Text] = [
            str(item.get("id", "")),
            f"{item.get('brand', '')} {item.get('model', '')}",
            str(item.get("kind", "")),
            str(item.get("color", "")),
        ]
        if verbose:
            row.append(str(item.get("year", "")))
            row.append(str(item.get("tires", "")))
        row.append(_fuel_text(item))
        row.append(_engine_text(bool(item.get("engine_on"))))
        table.add_row(*row)

    console.print(table)


def _render_preset_table(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="fleet.id", no_wrap=True)
    table.add_column("Vehicle", style="fleet.vehicle")
    table.add_column("Kind")
    table.add_column("Color")
    for item in items:
        table.add_row(
            str(item.get("name", "")),
            f"{item.get('brand', '')} {item.get('model', '')}",
            str(item.get("kind", "")),
            str(item.get("color", "")),
        )
    console.print(table)


# ── Failures ──────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "unknown error"
    console.print(
        Text.assemble(("ERROR", "fleet.error"), (f"  {result.op}", "fleet.op"), f" — {msg}")
    )

    if err is not None and verbose:
        _field(console, "code", err.code)
        if err.detail:
            console.print(Text("  detail:", style="fleet.key"))
            for k, v in err.detail.items():
                console.print(f"    {k}: {v}", markup=False)


# ── Anything else ─────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    # Creation
    "create_vehicle": _render_vehicle,
    "create_from_preset": _render_vehicle,
    "register_vehicle": _render_vehicle,
    # Queries
    "get_vehicle": _render_vehicle,
    "list_vehicles": _render_vehicle_table,
    "list_presets": _render_preset_table,
    # State machine
    "add_fuel": _render_vehicle,
    "start_engine": _render_vehicle,
    "stop_engine": _render_vehicle,
}
