"""Command: interactive session over a single in-memory store.

The store lives only as long as the process, so one-shot commands each
see an empty fleet.  ``fleetctl shell`` keeps one process alive and runs
every input line as a fleetctl subcommand against the same store.
"""

from __future__ import annotations

import shlex
import sys
import uuid
from typing import TYPE_CHECKING

import click

from fleetctl.commands._base import FleetCommand
from fleetctl.config.logging import bind_log_context, clear_log_context

if TYPE_CHECKING:
    from fleetctl.commands._context import AppContext

_EXIT_WORDS = frozenset({"exit", "quit"})


def _run_line(ctx: click.Context, argv: list[str]) -> None:
    """Resolve *argv* against the root group and invoke it under *ctx*."""
    group = ctx.command
    assert isinstance(group, click.Group)
    name, args = argv[0], argv[1:]
    cmd = group.get_command(ctx, name)
    if cmd is None or name == "shell":
        raise click.UsageError(f"Unknown command: {name!r}", ctx=ctx)
    with cmd.make_context(name, args, parent=ctx) as sub_ctx:
        cmd.invoke(sub_ctx)


@click.command(
    cls=FleetCommand,
    examples="""\
  fleetctl shell
  printf 'preset mustang\\nlist\\n' | fleetctl --json shell
  fleetctl shell --strict < script.txt""",
)
@click.option("--prompt", default="fleet> ", show_default=True, help="Prompt shown on a TTY.")
@click.option("--strict", is_flag=True, help="Exit with code 1 if any command failed.")
@click.pass_context
def shell(ctx: click.Context, prompt: str, strict: bool) -> None:
    """Read fleetctl commands from stdin and run them against one fleet.

    Blank lines and lines starting with ``#`` are skipped; ``exit`` or
    ``quit`` ends the session.  Failed commands are reported and the
    session continues.
    """
    app: AppContext = ctx.obj
    root = ctx.find_root()
    app.interactive = True

    stdin = sys.stdin
    show_prompt = stdin.isatty()
    bind_log_context(session=uuid.uuid4().hex[:8])
    try:
        while True:
            if show_prompt:
                click.echo(prompt, nl=False)
            line = stdin.readline()
            if not line:
                break
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if line in _EXIT_WORDS:
                break
            try:
                argv = shlex.split(line)
                _run_line(root, argv)
            except ValueError as exc:
                app.failures += 1
                click.echo(f"ERROR: {exc}", err=True)
            except click.ClickException as exc:
                app.failures += 1
                exc.show()
            except click.exceptions.Exit:
                # --help / --examples inside the shell
                continue
    finally:
        clear_log_context()

    if strict and app.failures:
        raise SystemExit(1)
