"""ServiceResult — what every FleetService method returns.

INVARIANT: Service methods never raise for domain failures; they return
a result with ``ok=False`` and a populated ``error``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable code, a message, and context."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service call.

    Attributes:
        ok: True when the operation took effect.
        op: Service operation name, e.g. ``"add_fuel"``.
        data: JSON-ready payload; empty on failure.
        warnings: Notes about a successful call (a tank filling early).
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Failed result for *op*; keyword arguments become ``error.detail``."""
        error = ServiceError(code=str(code), message=message, detail=detail)
        return cls(ok=False, op=op, error=error)
