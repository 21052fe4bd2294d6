"""Response envelope shared by every non-liveness endpoint."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")

FALLBACK_ERROR = "Request failed"


class ApiResponse(BaseModel, Generic[T]):
    """Uniform ``{success, data, error}`` wrapper.

    ``success`` is true iff ``data`` is present and ``error`` is absent. The
    back-end produces envelopes that hold this; the transport synthesizes
    failure envelopes through ``failure()`` when no backend envelope exists.
    """

    success: bool
    data: T | None = None
    error: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def failure(cls, message: str | None) -> ApiResponse[T]:
        """Build a failure envelope, falling back to a generic message."""
        return cls(success=False, data=None, error=message or FALLBACK_ERROR)


class HealthResponse(BaseModel):
    """Liveness probe payload (not wrapped in an envelope)."""

    status: str
    timestamp: str

    model_config = ConfigDict(frozen=True)
