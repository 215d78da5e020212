"""AppContext — per-process state handed to every command.

The root group stores one on ``ctx.obj``; commands receive it through
``@click.pass_obj``.  It owns the process's only :class:`VehicleStore`,
the :class:`FleetService` over it, and :meth:`AppContext.emit`, which is
the single place results are printed and turned into exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fleetctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from fleetctl.config.settings import FleetSettings
    from fleetctl.infrastructure.store import VehicleStore
    from fleetctl.services.fleet import FleetService
    from fleetctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The store and service are created lazily so ``--help`` and
    ``--version`` never build them.  ``interactive`` is set by
    ``fleetctl shell``: failures are then reported without exiting.
    """

    def __init__(self, settings: FleetSettings) -> None:
        self.settings = settings
        self.interactive = False
        self.failures = 0
        self._store: VehicleStore | None = None
        self._service: FleetService | None = None

        from fleetctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def store(self) -> VehicleStore:
        """The process's vehicle store (created on first access)."""
        if self._store is None:
            from fleetctl.infrastructure.store import VehicleStore

            self._store = VehicleStore()
        return self._store

    @property
    def service(self) -> FleetService:
        """FleetService bound to :attr:`store` and the configured defaults."""
        if self._service is None:
            from fleetctl.services.fleet import FleetService

            self._service = FleetService(
                self.store,
                default_color=self.settings.defaults.color,
                default_year=self.settings.defaults.year,
                presets={
                    name: preset.to_preset() for name, preset in self.settings.presets.items()
                },
            )
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and apply its exit status.

        Successes go to stdout, with any warnings as ``WARNING:`` lines on
        stderr.  Failures go to stderr and end the process with exit code 1;
        in a shell session they are only counted.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON output already carries the warnings list.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
            return

        click.echo(output, err=True)
        self.failures += 1
        if not self.interactive:
            raise SystemExit(1)
