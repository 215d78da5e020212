"""Shared pytest fixtures and test helpers for fleetctl tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from fleetctl.infrastructure.store import VehicleStore
from fleetctl.services.fleet import FleetService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def store() -> VehicleStore:
    """A fresh, empty vehicle store."""
    return VehicleStore()


@pytest.fixture
def service(store: VehicleStore) -> FleetService:
    """FleetService bound to the ``store`` fixture."""
    return FleetService(store)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no fleetctl config in scope.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes so a stray ``fleetctl.toml`` or env var never leaks in.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FLEETCTL_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers (used across test modules)
# ---------------------------------------------------------------------------


def create_car(
    service: FleetService,
    brand: str = "Ford",
    model: str = "Mustang",
    **kwargs: Any,
) -> dict[str, Any]:
    """Create a car via FleetService, asserting success."""
    result = service.create_vehicle("car", brand, model, **kwargs)
    assert result.ok, result.error
    return result.data


def fuel_until_full(vehicle: Any) -> int:
    """Call ``add_fuel`` until the tank reports full; return the success count."""
    successes = 0
    while vehicle.add_fuel().ok:
        successes += 1
    return successes
