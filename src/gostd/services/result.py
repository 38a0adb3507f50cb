"""ServiceResult and ServiceError: what every service operation returns.

INVARIANT: Service methods never raise for expected failures (bad input,
missing tag, source failure).  They return ``ok=False`` with a stable
error ``code`` instead, and the CLI decides how to render it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

INVALID_VERSION = "INVALID_VERSION"
UNSUPPORTED_PRERELEASE = "UNSUPPORTED_PRERELEASE"
ARCHIVE_NOT_FOUND = "ARCHIVE_NOT_FOUND"
SOURCE_FAILED = "SOURCE_FAILED"
WRITE_FAILED = "WRITE_FAILED"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"tag_for_version"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal notes about the result.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None


def failure(op: str, code: str, exc: Exception, **detail: Any) -> ServiceResult:
    """Build an ``ok=False`` result from a caught exception."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=str(exc), detail=detail),
    )
