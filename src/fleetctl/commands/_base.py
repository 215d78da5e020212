"""Click command classes carrying an ``--examples`` flag.

``--help`` stays short; worked invocations are printed by ``--examples``,
which is eager and exits before the command body runs.
"""

from __future__ import annotations

from typing import Any

import click


def examples_option(examples: str) -> click.Option:
    """Build the eager ``--examples`` option printing *examples*."""

    def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n")
            click.echo(examples)
            ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_print_examples,
        help="Show usage examples and exit.",
    )


class FleetCommand(click.Command):
    """A command that accepts ``examples=`` in its decorator."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(examples_option(examples))


class FleetGroup(click.Group):
    """The root group; subcommands default to :class:`FleetCommand`."""

    command_class = FleetCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(examples_option(examples))
