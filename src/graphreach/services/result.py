"""ServiceResult and ServiceError — the contract between services and the CLI.

INVARIANT: every ReachabilityService method returns a ServiceResult.
Absent or unknown inputs are ``ok`` results with warnings; only problems
with the graph itself (missing, invalid, wrong view) are failures.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Failure codes carried by ServiceError."""

    GRAPH_NOT_CONFIGURED = "GRAPH_NOT_CONFIGURED"
    INVALID_GRAPH = "INVALID_GRAPH"
    UNSUPPORTED_VIEW = "UNSUPPORTED_VIEW"
    INVALID_VALUES = "INVALID_VALUES"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type of all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"odd_vertices"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as an unknown start vertex.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry span tree).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result with a single error."""
        error = ServiceError(code=str(code), message=message, detail=detail)
        return cls(ok=False, op=op, error=error)
