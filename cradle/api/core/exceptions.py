"""Custom exception hierarchy.

Endpoint methods never raise for backend or transport failures; those are
reported through the response envelope. The exceptions here cover the few
places that do raise: bad configuration and the liveness probe.
"""

from __future__ import annotations


class CradleError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(CradleError):
    """Client configuration is missing or invalid."""

    pass


class HealthCheckError(CradleError):
    """The liveness probe did not return a healthy response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
