"""Vehicle kinds and the per-kind data table.

Car and motorcycle differ only in tire count and default tank size, so
they are rows in :data:`KIND_PROFILES` rather than separate classes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class VehicleKind(StrEnum):
    """Supported vehicle categories."""

    CAR = "car"
    MOTORCYCLE = "motorcycle"


@dataclass(frozen=True)
class KindProfile:
    """Fixed attributes shared by every vehicle of one kind."""

    tires: int
    default_capacity: float


KIND_PROFILES: dict[VehicleKind, KindProfile] = {
    VehicleKind.CAR: KindProfile(tires=4, default_capacity=10.0),
    VehicleKind.MOTORCYCLE: KindProfile(tires=2, default_capacity=5.0),
}

DEFAULT_COLOR = "White"

# --- Fuel constants ---

FUEL_INCREMENT = 0.1  # units added per pump
MINIMUM_FUEL_TO_START = 0.01  # below this the tank counts as empty


def profile_for(kind: VehicleKind | str) -> KindProfile:
    """Return the profile for *kind*. Raises ValueError for unknown kinds."""
    return KIND_PROFILES[VehicleKind(kind)]
