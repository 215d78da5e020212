"""Typed outcomes for vehicle operations.

Full tanks and running engines are expected conditions, not faults, so
state-machine operations return an :class:`Outcome` instead of raising.

INVARIANT: A failed Outcome means no state was changed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ErrorCode(StrEnum):
    """Every failure a fleet operation can report."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_RUNNING = "ALREADY_RUNNING"
    ALREADY_STOPPED = "ALREADY_STOPPED"
    TANK_FULL = "TANK_FULL"
    INSUFFICIENT_FUEL = "INSUFFICIENT_FUEL"


class ErrorCategory(StrEnum):
    """Coarse grouping of error codes."""

    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    ENGINE = "engine"
    FUEL = "fuel"


ERROR_CATEGORIES: dict[ErrorCode, ErrorCategory] = {
    ErrorCode.INVALID_ARGUMENT: ErrorCategory.INVALID_ARGUMENT,
    ErrorCode.NOT_FOUND: ErrorCategory.NOT_FOUND,
    ErrorCode.ALREADY_RUNNING: ErrorCategory.ENGINE,
    ErrorCode.ALREADY_STOPPED: ErrorCategory.ENGINE,
    ErrorCode.TANK_FULL: ErrorCategory.FUEL,
    ErrorCode.INSUFFICIENT_FUEL: ErrorCategory.FUEL,
}

# --- User-facing messages ---

MSG_TANK_FULL = "Fuel tank is already full."
MSG_ALREADY_RUNNING = "Engine is already running."
MSG_ALREADY_STOPPED = "Engine is already stopped."
MSG_INSUFFICIENT_FUEL = "Insufficient fuel to start engine. Please refuel."
MSG_NOT_FOUND = "Vehicle not found."
MSG_INVALID_ID = "Invalid vehicle ID."


@dataclass(frozen=True)
class Outcome:
    """Result of a single state-machine operation."""

    ok: bool
    code: ErrorCode | None = None
    message: str = ""

    @classmethod
    def success(cls) -> Outcome:
        return cls(ok=True)

    @classmethod
    def failure(cls, code: ErrorCode, message: str) -> Outcome:
        return cls(ok=False, code=code, message=message)

    @property
    def category(self) -> ErrorCategory | None:
        if self.code is None:
            return None
        return ERROR_CATEGORIES[self.code]
