"""Tests for the Rich renderers."""

from __future__ import annotations

from typing import Any

import pytest

from fleetctl.infrastructure.store import VehicleStore
from fleetctl.output.renderers import render_quiet, render_result
from fleetctl.services.fleet import FleetService
from fleetctl.services.result import ServiceError, ServiceResult


@pytest.fixture
def fleet() -> FleetService:
    return FleetService(VehicleStore())


def _vehicle(fleet: FleetService, **kwargs: Any) -> dict[str, Any]:
    result = fleet.create_vehicle("car", "Ford", "Mustang", color="Red", year=2020, **kwargs)
    assert result.ok
    return result.data


class TestRenderVehicle:
    def test_fields(self, fleet: FleetService) -> None:
        data = _vehicle(fleet)
        output = render_result(fleet.get_vehicle(data["id"]))
        assert output.startswith("OK  get_vehicle")
        assert f"id: {data['id']}" in output
        assert "vehicle: Ford Mustang (car)" in output
        assert "color: Red" in output
        assert "year: 2020" in output
        assert "fuel: 0.00 / 10.00" in output
        assert "engine: off" in output
        assert "tires" not in output

    def test_verbose_shows_tires(self, fleet: FleetService) -> None:
        data = _vehicle(fleet)
        output = render_result(fleet.get_vehicle(data["id"]), verbose=True)
        assert "tires: 4" in output

    def test_add_fuel_shows_pumps(self, fleet: FleetService) -> None:
        vid = _vehicle(fleet)["id"]
        output = render_result(fleet.add_fuel(vid, pumps=2))
        assert "fuel: 0.20 / 10.00" in output
        assert "pumps_applied: 2" in output

    def test_engine_on(self, fleet: FleetService) -> None:
        vid = _vehicle(fleet)["id"]
        fleet.add_fuel(vid)
        output = render_result(fleet.start_engine(vid))
        assert output.startswith("OK  start_engine")
        assert "engine: on" in output

    def test_preset_name(self, fleet: FleetService) -> None:
        output = render_result(fleet.create_from_preset("explorer"))
        assert "vehicle: Ford Explorer (car)" in output
        assert "preset: explorer" in output


class TestRenderTables:
    def test_empty_fleet(self, fleet: FleetService) -> None:
        output = render_result(fleet.list_vehicles())
        assert "No vehicles." in output

    def test_vehicle_rows(self, fleet: FleetService) -> None:
        first = _vehicle(fleet)["id"]
        second = fleet.create_vehicle("motorcycle", "Honda", "CB500").data["id"]
        output = render_result(fleet.list_vehicles())
        assert "Engine" in output
        assert output.index(first) < output.index(second)
        assert "Honda CB500" in output
        assert "0.00 / 5.00" in output
        assert "Tires" not in output

    def test_verbose_columns(self, fleet: FleetService) -> None:
        _vehicle(fleet)
        output = render_result(fleet.list_vehicles(), verbose=True)
        assert "Tires" in output
        assert "Year" in output

    def test_presets(self, fleet: FleetService) -> None:
        output = render_result(fleet.list_presets())
        assert "mustang" in output
        assert "Ford Explorer" in output


class TestRenderError:
    def test_error_line(self, fleet: FleetService) -> None:
        vid = _vehicle(fleet)["id"]
        output = render_result(fleet.start_engine(vid))
        assert output.startswith("ERROR  start_engine")
        assert "Insufficient fuel to start engine. Please refuel." in output
        assert "INSUFFICIENT_FUEL" not in output

    def test_verbose_error_detail(self, fleet: FleetService) -> None:
        vid = _vehicle(fleet)["id"]
        output = render_result(fleet.start_engine(vid), verbose=True)
        assert "code: INSUFFICIENT_FUEL" in output
        assert f"id: {vid}" in output
        assert "category: fuel" in output


class TestRenderQuiet:
    def test_single_vehicle_id(self, fleet: FleetService) -> None:
        data = _vehicle(fleet)
        assert render_quiet(fleet.get_vehicle(data["id"])) == data["id"]

    def test_list_ids(self, fleet: FleetService) -> None:
        ids = [_vehicle(fleet)["id"] for _ in range(3)]
        assert render_quiet(fleet.list_vehicles()).splitlines() == ids

    def test_preset_names(self, fleet: FleetService) -> None:
        assert render_quiet(fleet.list_presets()).splitlines() == ["explorer", "mustang"]

    def test_error(self) -> None:
        result = ServiceResult(
            ok=False, op="stop_engine", error=ServiceError(code="X", message="nope")
        )
        assert render_quiet(result) == "ERROR: stop_engine — nope"

    def test_no_id(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="ping")) == "OK: ping"
