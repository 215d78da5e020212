"""Named vehicle presets.

A preset is a stored set of :func:`~fleetctl.domain.vehicle.create_vehicle`
arguments.  The built-ins cover the two stock Ford models; ``fleetctl.toml``
can add more under ``[presets.<name>]``.
"""

from __future__ import annotations

from dataclasses import dataclass

from fleetctl.domain.types import VehicleKind
from fleetctl.domain.vehicle import Vehicle, create_vehicle


@dataclass(frozen=True)
class VehiclePreset:
    """Arguments for building one vehicle by name."""

    brand: str
    model: str
    kind: VehicleKind = VehicleKind.CAR
    color: str | None = None
    capacity: float | None = None
    year: int | None = None

    def build(
        self,
        *,
        default_color: str | None = None,
        default_year: int | None = None,
    ) -> Vehicle:
        """Create a new vehicle from this preset (fresh ID every call).

        The preset's own color and year win; the defaults fill in what it
        leaves unset.

        Raises:
            InvalidVehicleError: If the preset's attributes are invalid.
        """
        color = self.color if self.color and self.color.strip() else default_color
        return create_vehicle(
            self.kind,
            self.brand,
            self.model,
            color=color,
            capacity=self.capacity,
            year=self.year if self.year is not None else default_year,
        )


BUILTIN_PRESETS: dict[str, VehiclePreset] = {
    "mustang": VehiclePreset(brand="Ford", model="Mustang", color="Red"),
    "explorer": VehiclePreset(brand="Ford", model="Explorer", color="Black"),
}


def normalize_preset_name(name: str) -> str:
    """Lowercase and strip a preset name for lookup."""
    return name.strip().lower()
