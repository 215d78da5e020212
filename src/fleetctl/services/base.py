"""BaseService — abstract foundation for all fleetctl services.

Every service receives the process's :class:`VehicleStore` at
construction time.  There is no module-level store: whoever builds the
service decides which fleet it operates on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fleetctl.infrastructure.store import VehicleStore


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class FleetService(BaseService):
            def list_vehicles(self) -> ServiceResult:
                vehicles = self._store.list()
                ...
    """

    def __init__(self, store: VehicleStore) -> None:
        self._store = store
