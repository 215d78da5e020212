"""Rich console plumbing shared by the renderers.

Renderers never print to the terminal directly: they draw on a Console
whose file is a StringIO, and the text is collected afterwards so
``format_result()`` can return a plain string.  Without a terminal
attached (pipes, CliRunner) Rich emits no escape codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DEFAULT_WIDTH = 120

FLEET_THEME = Theme(
    {
        "fleet.ok": "bold green",
        "fleet.error": "bold red",
        "fleet.warning": "bold yellow",
        "fleet.op": "bold cyan",
        "fleet.key": "dim",
        "fleet.id": "bold blue",
        "fleet.vehicle": "bold",
        "fleet.engine.on": "green",
        "fleet.engine.off": "dim",
        "fleet.fuel.low": "yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Return a themed Console drawing into a fresh StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=FLEET_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Text drawn so far on a console made by :func:`create_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        raise TypeError("console was not created by create_console()")
    return buffer.getvalue()


def engine_style(engine_on: bool) -> str:
    return "fleet.engine.on" if engine_on else "fleet.engine.off"
