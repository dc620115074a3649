"""ServiceResult and ServiceError, the contract between services and the CLI.

INVARIANT: All service-layer methods return ServiceResult.
Rule violations become ``ok=False`` results, never tracebacks.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"check_email"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (timing).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, warnings: list[str] | None = None, **data: Any) -> ServiceResult:
        """Build an ``ok=True`` result with *data* as the payload."""
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build an ``ok=False`` result carrying a ServiceError."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
