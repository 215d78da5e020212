"""Vehicle — descriptive attributes plus the engine/fuel state machine.

Descriptive attributes are validated once by :class:`VehicleSpec` and
never change afterwards.  Runtime state (fuel level, engine flag) is
mutated only through :meth:`Vehicle.add_fuel`, :meth:`Vehicle.start_engine`
and :meth:`Vehicle.stop_engine`, each of which returns an
:class:`~fleetctl.domain.outcomes.Outcome`.

States::

    {engine off, engine on} x fuel_level in [0, fuel_capacity]

INVARIANT: ``0 <= fuel_level <= fuel_capacity`` at every observable point.
INVARIANT: ``start_engine`` checks the engine flag before the fuel level.

Each vehicle owns a lock so concurrent operations on the same vehicle
serialize while unrelated vehicles never contend.
"""

from __future__ import annotations

import threading
from datetime import date
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, ValidationError, field_validator

from fleetctl.domain.ids import new_vehicle_id
from fleetctl.domain.outcomes import (
    MSG_ALREADY_RUNNING,
    MSG_ALREADY_STOPPED,
    MSG_INSUFFICIENT_FUEL,
    MSG_TANK_FULL,
    ErrorCode,
    Outcome,
)
from fleetctl.domain.types import (
    DEFAULT_COLOR,
    FUEL_INCREMENT,
    MINIMUM_FUEL_TO_START,
    VehicleKind,
    profile_for,
)

# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class InvalidVehicleError(ValueError):
    """Raised by :func:`create_vehicle` when the attributes are invalid."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__("; ".join(errors))


class VehicleSpec(BaseModel):
    """Immutable descriptive attributes of one vehicle."""

    model_config = {"frozen": True}

    kind: VehicleKind
    brand: str
    model: str
    color: str = DEFAULT_COLOR
    fuel_capacity: float = Field(gt=0, allow_inf_nan=False)
    year: int

    @field_validator("brand", "model")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("cannot be empty")
        return value

    @field_validator("color", mode="before")
    @classmethod
    def _default_color(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_COLOR
        return value

    @property
    def tires(self) -> int:
        return profile_for(self.kind).tires


def _format_errors(exc: ValidationError) -> list[str]:
    """Flatten pydantic errors into ``field: message`` strings."""
    messages: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "vehicle"
        messages.append(f"{loc}: {err['msg']}")
    return messages


def create_vehicle(
    kind: VehicleKind | str,
    brand: str,
    model: str,
    *,
    color: str | None = None,
    capacity: float | None = None,
    year: int | None = None,
) -> Vehicle:
    """Validate attributes and build a new vehicle with a fresh ID.

    Args:
        kind: ``"car"`` or ``"motorcycle"``.
        brand: Manufacturer name, must not be blank.
        model: Model name, must not be blank.
        color: Paint color; blank or None falls back to ``"White"``.
        capacity: Tank size; None uses the kind's default capacity.
        year: Model year; None uses the current calendar year.

    Raises:
        InvalidVehicleError: If any attribute is invalid.  No vehicle is
            constructed in that case.
    """
    try:
        resolved_kind = VehicleKind(kind)
    except ValueError:
        choices = ", ".join(k.value for k in VehicleKind)
        raise InvalidVehicleError([f"kind: must be one of {choices}, got {kind!r}"]) from None

    if capacity is None:
        capacity = profile_for(resolved_kind).default_capacity

    try:
        spec = VehicleSpec(
            kind=resolved_kind,
            brand=brand,
            model=model,
            color=color,
            fuel_capacity=capacity,
            year=year if year is not None else date.today().year,
        )
    except ValidationError as exc:
        raise InvalidVehicleError(_format_errors(exc)) from exc
    return Vehicle(spec)


# ---------------------------------------------------------------------------
# Snapshot — consistent read of one vehicle
# ---------------------------------------------------------------------------


class VehicleSnapshot(BaseModel):
    """Frozen copy of a vehicle's attributes and runtime state."""

    model_config = {"frozen": True}

    id: UUID
    kind: VehicleKind
    tires: int
    color: str
    brand: str
    model: str
    year: int
    fuel_capacity: float
    fuel_level: float
    engine_on: bool
    needs_fuel: bool


# ---------------------------------------------------------------------------
# Vehicle — state machine
# ---------------------------------------------------------------------------


class Vehicle:
    """One vehicle and its engine/fuel state machine."""

    def __init__(self, spec: VehicleSpec, vehicle_id: UUID | None = None) -> None:
        self._spec = spec
        self._id = vehicle_id if vehicle_id is not None else new_vehicle_id()
        self._fuel_level = 0.0
        self._engine_on = False
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"Vehicle(id={self._id}, {self._spec.brand} {self._spec.model})"

    # --- Immutable attributes ---

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def spec(self) -> VehicleSpec:
        return self._spec

    @property
    def kind(self) -> VehicleKind:
        return self._spec.kind

    @property
    def tires(self) -> int:
        return self._spec.tires

    @property
    def color(self) -> str:
        return self._spec.color

    @property
    def brand(self) -> str:
        return self._spec.brand

    @property
    def model(self) -> str:
        return self._spec.model

    @property
    def year(self) -> int:
        return self._spec.year

    @property
    def fuel_capacity(self) -> float:
        return self._spec.fuel_capacity

    # --- Runtime state ---

    @property
    def fuel_level(self) -> float:
        with self._lock:
            return self._fuel_level

    def add_fuel(self) -> Outcome:
        """Pump one :data:`FUEL_INCREMENT` into the tank, clamped to capacity."""
        with self._lock:
            capacity = self._spec.fuel_capacity
            if self._fuel_level >= capacity:
                return Outcome.failure(ErrorCode.TANK_FULL, MSG_TANK_FULL)
            self._fuel_level = min(self._fuel_level + FUEL_INCREMENT, capacity)
            return Outcome.success()

    def start_engine(self) -> Outcome:
        """Turn the engine on.

        A running engine is reported before an empty tank, so starting a
        running vehicle always yields ``ALREADY_RUNNING``.
        """
        with self._lock:
            if self._engine_on:
                return Outcome.failure(ErrorCode.ALREADY_RUNNING, MSG_ALREADY_RUNNING)
            if self._needs_fuel():
                return Outcome.failure(ErrorCode.INSUFFICIENT_FUEL, MSG_INSUFFICIENT_FUEL)
            self._engine_on = True
            return Outcome.success()

    def stop_engine(self) -> Outcome:
        """Turn the engine off."""
        with self._lock:
            if not self._engine_on:
                return Outcome.failure(ErrorCode.ALREADY_STOPPED, MSG_ALREADY_STOPPED)
            self._engine_on = False
            return Outcome.success()

    def needs_fuel(self) -> bool:
        """True when the tank holds less than :data:`MINIMUM_FUEL_TO_START`."""
        with self._lock:
            return self._needs_fuel()

    def is_engine_on(self) -> bool:
        with self._lock:
            return self._engine_on

    def snapshot(self) -> VehicleSnapshot:
        """Read attributes and runtime state together under the vehicle lock."""
        spec = self._spec
        with self._lock:
            fuel_level = self._fuel_level
            engine_on = self._engine_on
            needs_fuel = self._needs_fuel()
        return VehicleSnapshot(
            id=self._id,
            kind=spec.kind,
            tires=spec.tires,
            color=spec.color,
            brand=spec.brand,
            model=spec.model,
            year=spec.year,
            fuel_capacity=spec.fuel_capacity,
            fuel_level=fuel_level,
            engine_on=engine_on,
            needs_fuel=needs_fuel,
        )

    # Caller must hold self._lock.
    def _needs_fuel(self) -> bool:
        return self._fuel_level < MINIMUM_FUEL_TO_START
