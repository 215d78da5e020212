"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, fleetctl.toml only contains
overrides.  An empty or missing file gives a working configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

from fleetctl.domain.presets import VehiclePreset
from fleetctl.domain.types import DEFAULT_COLOR, VehicleKind

# --- fleetctl.toml sections ---


class DefaultsConfig(BaseModel):
    """[defaults] section — fallbacks for create calls."""

    model_config = {"frozen": True}

    color: str = DEFAULT_COLOR
    year: int | None = None  # None = current calendar year


class PresetConfig(BaseModel):
    """[presets.<name>] section."""

    model_config = {"frozen": True}

    brand: str
    model: str
    kind: VehicleKind = VehicleKind.CAR
    color: str | None = None
    capacity: float | None = None
    year: int | None = None

    def to_preset(self) -> VehiclePreset:
        return VehiclePreset(
            brand=self.brand,
            model=self.model,
            kind=self.kind,
            color=self.color,
            capacity=self.capacity,
            year=self.year,
        )

