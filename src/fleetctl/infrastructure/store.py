"""VehicleStore — volatile, thread-safe registry of vehicles.

One store is constructed per running process and handed to the services
that need it.  Nothing is persisted; the fleet disappears with the
process.

Structural access (``add``, ``find``, ``list``) is serialized by a single
lock around the underlying dict.  Per-vehicle engine/fuel state has its
own lock inside :class:`~fleetctl.domain.vehicle.Vehicle`, so mutating a
vehicle never holds the store lock.

INVARIANT: ``list()`` preserves insertion order.
INVARIANT: Vehicles are never removed.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from uuid import UUID

    from fleetctl.domain.vehicle import Vehicle

logger = logging.getLogger(__name__)


class VehicleStore:
    """In-memory vehicle registry keyed by vehicle ID."""

    def __init__(self) -> None:
        # dict preserves insertion order, which is the listing order.
        self._vehicles: dict[UUID, Vehicle] = {}
        self._lock = threading.Lock()

    def add(self, vehicle: Vehicle | None) -> None:
        """Register *vehicle*.

        ID uniqueness is the constructor's job and is not re-checked here.

        Raises:
            ValueError: If *vehicle* is None.
        """
        if vehicle is None:
            raise ValueError("vehicle cannot be None")
        with self._lock:
            self._vehicles[vehicle.id] = vehicle
            count = len(self._vehicles)
        logger.debug("Registered vehicle %s (%d in store)", vehicle.id, count)

    def find(self, vehicle_id: UUID) -> Vehicle | None:
        """Return the vehicle with *vehicle_id*, or None if unknown."""
        with self._lock:
            return self._vehicles.get(vehicle_id)

    def list(self) -> list[Vehicle]:
        """Snapshot of all vehicles in the order they were added."""
        with self._lock:
            return list(self._vehicles.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._vehicles)

    def __contains__(self, vehicle_id: object) -> bool:
        with self._lock:
            return vehicle_id in self._vehicles
