"""FleetService — one call per user intent over the vehicle store.

Each mutating method resolves a vehicle ID, runs the matching state-machine
operation and returns its outcome as a :class:`ServiceResult`:

    PARSE ID → FIND → OPERATE → RESPOND

Domain failures keep their error code (``TANK_FULL``, ``ALREADY_RUNNING``,
...) so callers can map them to their own messages.  Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fleetctl.domain.ids import format_vehicle_id, parse_vehicle_id
from fleetctl.domain.outcomes import (
    MSG_INVALID_ID,
    MSG_NOT_FOUND,
    ErrorCode,
    Outcome,
)
from fleetctl.domain.presets import BUILTIN_PRESETS, VehiclePreset, normalize_preset_name
from fleetctl.domain.vehicle import InvalidVehicleError, Vehicle, create_vehicle
from fleetctl.services.base import BaseService
from fleetctl.services.result import ServiceResult

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from uuid import UUID

    from fleetctl.domain.types import VehicleKind
    from fleetctl.infrastructure.store import VehicleStore

logger = logging.getLogger(__name__)


def vehicle_data(vehicle: Vehicle) -> dict[str, Any]:
    """JSON-ready dict of a vehicle's attributes and current state."""
    return vehicle.snapshot().model_dump(mode="json")


class FleetService(BaseService):
    """Creates, looks up, fuels, starts, and stops vehicles.

    Args:
        store: The fleet this service operates on.
        default_color: Color used when a create call gives none.
        default_year: Model year used when a create call gives none.
        presets: Extra named presets, merged over the built-in ones.
    """

    def __init__(
        self,
        store: VehicleStore,
        *,
        default_color: str | None = None,
        default_year: int | None = None,
        presets: Mapping[str, VehiclePreset] | None = None,
    ) -> None:
        super().__init__(store)
        self._default_color = default_color
        self._default_year = default_year
        self._presets: dict[str, VehiclePreset] = dict(BUILTIN_PRESETS)
        for name, preset in (presets or {}).items():
            self._presets[normalize_preset_name(name)] = preset

    # ------------------------------------------------------------------
    # Creation and registration
    # ------------------------------------------------------------------

    def create_vehicle(
        self,
        kind: VehicleKind | str,
        brand: str,
        model: str,
        *,
        color: str | None = None,
        capacity: float | None = None,
        year: int | None = None,
    ) -> ServiceResult:
        """Validate, build and register a new vehicle."""
        if color is None or (isinstance(color, str) and not color.strip()):
            color = self._default_color
        if year is None:
            year = self._default_year
        return self._create(
            "create_vehicle",
            lambda: create_vehicle(
                kind, brand, model, color=color, capacity=capacity, year=year
            ),
        )

    def create_from_preset(self, name: str) -> ServiceResult:
        """Build and register a vehicle from a named preset."""
        op = "create_from_preset"
        key = normalize_preset_name(name)
        preset = self._presets.get(key)
        if preset is None:
            return ServiceResult.failure(
                op,
                ErrorCode.INVALID_ARGUMENT,
                f"Unknown preset: {name!r}",
                available=sorted(self._presets),
            )
        return self._create(
            op,
            lambda: preset.build(
                default_color=self._default_color, default_year=self._default_year
            ),
            extra={"preset": key},
        )

    def list_presets(self) -> ServiceResult:
        """List every preset available to :meth:`create_from_preset`."""
        items = [
            {
                "name": name,
                "kind": str(preset.kind),
                "brand": preset.brand,
                "model": preset.model,
                "color": preset.color or self._default_color or "",
            }
            for name, preset in sorted(self._presets.items())
        ]
        return ServiceResult(ok=True, op="list_presets", data={"items": items, "count": len(items)})

    def register(self, vehicle: Vehicle | None) -> ServiceResult:
        """Add an already-constructed vehicle to the store."""
        op = "register_vehicle"
        try:
            self._store.add(vehicle)
        except ValueError as exc:
            return ServiceResult.failure(op, ErrorCode.INVALID_ARGUMENT, str(exc))
        assert vehicle is not None
        logger.info("Registered %s %s with ID %s", vehicle.brand, vehicle.model, vehicle.id)
        return ServiceResult(ok=True, op=op, data=vehicle_data(vehicle))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_vehicle(self, vehicle_id: str | UUID) -> ServiceResult:
        """Look up one vehicle by ID."""
        op = "get_vehicle"
        vehicle, error = self._resolve(op, vehicle_id)
        if error is not None:
            return error
        assert vehicle is not None
        return ServiceResult(ok=True, op=op, data=vehicle_data(vehicle))

    def list_vehicles(self) -> ServiceResult:
        """All vehicles in the order they were added."""
        items = [vehicle_data(v) for v in self._store.list()]
        return ServiceResult(
            ok=True,
            op="list_vehicles",
            data={"items": items, "count": len(items)},
        )

    def needs_fuel(self, vehicle_id: str | UUID) -> ServiceResult:
        """Report whether the vehicle is below the start threshold."""
        return self._query("needs_fuel", vehicle_id, lambda v: v.needs_fuel())

    def is_engine_on(self, vehicle_id: str | UUID) -> ServiceResult:
        """Report whether the vehicle's engine is running."""
        return self._query("is_engine_on", vehicle_id, lambda v: v.is_engine_on(), key="engine_on")

    # ------------------------------------------------------------------
    # State-machine operations
    # ------------------------------------------------------------------

    def add_fuel(self, vehicle_id: str | UUID, *, pumps: int = 1) -> ServiceResult:
        """Pump fuel into a vehicle, one increment per pump.

        Stops at the first ``TANK_FULL``.  If at least one pump went in
        before the tank filled, the result is ok with a warning.
        """
        op = "add_fuel"
        if pumps < 1:
            return ServiceResult.failure(
                op, ErrorCode.INVALID_ARGUMENT, "pumps must be at least 1", pumps=pumps
            )
        vehicle, error = self._resolve(op, vehicle_id)
        if error is not None:
            return error
        assert vehicle is not None

        applied = 0
        for _ in range(pumps):
            outcome = vehicle.add_fuel()
            if not outcome.ok:
                if applied == 0:
                    return self._failed(op, vehicle, outcome)
                break
            applied += 1

        warnings: list[str] = []
        if applied < pumps:
            warnings.append(f"Tank filled after {applied} of {pumps} pumps")
        logger.info("Added fuel to vehicle %s (%d pumps)", vehicle.id, applied)
        data = vehicle_data(vehicle)
        data["pumps_applied"] = applied
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def start_engine(self, vehicle_id: str | UUID) -> ServiceResult:
        """Start a vehicle's engine."""
        return self._operate("start_engine", vehicle_id, lambda v: v.start_engine())

    def stop_engine(self, vehicle_id: str | UUID) -> ServiceResult:
        """Stop a vehicle's engine."""
        return self._operate("stop_engine", vehicle_id, lambda v: v.stop_engine())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _create(
        self,
        op: str,
        build: Callable[[], Vehicle],
        *,
        extra: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Run *build* and register the vehicle it returns."""
        try:
            vehicle = build()
        except InvalidVehicleError as exc:
            logger.info("Rejected vehicle for %s: %s", op, exc)
            return ServiceResult.failure(
                op, ErrorCode.INVALID_ARGUMENT, str(exc), errors=exc.errors
            )

        self._store.add(vehicle)
        logger.info("Added %s %s with ID %s", vehicle.brand, vehicle.model, vehicle.id)
        data = vehicle_data(vehicle)
        if extra:
            data.update(extra)
        return ServiceResult(ok=True, op=op, data=data)

    def _resolve(
        self, op: str, vehicle_id: str | UUID
    ) -> tuple[Vehicle | None, ServiceResult | None]:
        """Parse and look up *vehicle_id*; return the vehicle or a failed result."""
        parsed = parse_vehicle_id(vehicle_id)
        if parsed is None:
            return None, ServiceResult.failure(
                op, ErrorCode.INVALID_ARGUMENT, MSG_INVALID_ID, id=str(vehicle_id)
            )
        vehicle = self._store.find(parsed)
        if vehicle is None:
            return None, ServiceResult.failure(
                op, ErrorCode.NOT_FOUND, MSG_NOT_FOUND, id=format_vehicle_id(parsed)
            )
        return vehicle, None

    def _operate(
        self,
        op: str,
        vehicle_id: str | UUID,
        action: Callable[[Vehicle], Outcome],
    ) -> ServiceResult:
        vehicle, error = self._resolve(op, vehicle_id)
        if error is not None:
            return error
        assert vehicle is not None

        outcome = action(vehicle)
        if not outcome.ok:
            return self._failed(op, vehicle, outcome)
        logger.info("%s succeeded for vehicle %s", op, vehicle.id)
        return ServiceResult(ok=True, op=op, data=vehicle_data(vehicle))

    def _query(
        self,
        op: str,
        vehicle_id: str | UUID,
        read: Callable[[Vehicle], bool],
        *,
        key: str | None = None,
    ) -> ServiceResult:
        vehicle, error = self._resolve(op, vehicle_id)
        if error is not None:
            return error
        assert vehicle is not None
        return ServiceResult(
            ok=True,
            op=op,
            data={"id": format_vehicle_id(vehicle.id), key or op: read(vehicle)},
        )

    @staticmethod
    def _failed(op: str, vehicle: Vehicle, outcome: Outcome) -> ServiceResult:
        assert outcome.code is not None
        logger.info("%s failed for vehicle %s: %s", op, vehicle.id, outcome.message)
        return ServiceResult.failure(
            op,
            outcome.code,
            outcome.message,
            id=format_vehicle_id(vehicle.id),
            category=str(outcome.category),
        )
