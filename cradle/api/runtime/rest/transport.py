"""REST transport that normalizes every outcome into a response envelope.

Architecture:
    RESTTransport sits between the endpoint runner and HTTPClient. It owns
    the connection profile (ClientConfig) and the one contract every typed
    endpoint relies on: ``request()`` always returns an envelope-shaped
    dict and never raises for transport problems.

    - Backend envelopes (any HTTP status, JSON object with a boolean
      ``success``) are returned verbatim; the back-end encodes its own
      failures inside the envelope.
    - Timeouts, connection errors, undecodable bodies and non-envelope
      bodies become ``{"success": False, "data": None, "error": ...}``.

    The liveness probe (``get_raw``) is the exception: it sends no bearer
    token and lets failures propagate.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from ...config import TUNNEL_BYPASS_HEADER, TUNNEL_BYPASS_VALUE, ClientConfig
from ...models.envelope import FALLBACK_ERROR, ApiResponse
from .http_client import HTTPClient, HTTPResult

logger = logging.getLogger(__name__)

STATIC_HEADERS = {
    "Content-Type": "application/json",
    TUNNEL_BYPASS_HEADER: TUNNEL_BYPASS_VALUE,
}


def is_envelope(payload: Any) -> bool:
    """True if ``payload`` has the ``{success, data, error}`` shape."""
    return isinstance(payload, dict) and isinstance(payload.get("success"), bool)


def failure_envelope(message: str | None) -> dict[str, Any]:
    return ApiResponse.failure(message).model_dump()


class RESTTransport:
    """Envelope-normalizing transport over HTTPClient."""

    def __init__(self, config: ClientConfig, http: HTTPClient | None = None) -> None:
        self._config = config
        self._http = http or HTTPClient(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            headers=STATIC_HEADERS,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._config.api_key}"}

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        authenticated: bool = True,
    ) -> dict[str, Any]:
        """Issue one request and return its envelope.

        Args:
            method: "GET" or "POST"
            path: Path relative to the configured base URL, query included
            body: JSON body for POST requests
            authenticated: Attach the bearer token

        Returns:
            The backend envelope, or a synthesized failure envelope
        """
        headers = self._auth_headers() if authenticated else None
        logger.debug("Sending request", extra={"method": method, "path": path})

        try:
            result = await self._http.request(method, path, json=body, headers=headers)
        except asyncio.TimeoutError:
            return self._transport_failure(
                method, path, f"Request timed out after {self._config.timeout_ms}ms"
            )
        except aiohttp.ClientError as e:
            return self._transport_failure(method, path, str(e))

        logger.debug(
            "Received response",
            extra={"method": method, "path": path, "status": result.status},
        )
        return self._normalize(method, path, result)

    def _normalize(self, method: str, path: str, result: HTTPResult) -> dict[str, Any]:
        try:
            payload = json.loads(result.body)
        except ValueError as e:
            if not result.ok:
                return self._transport_failure(method, path, self._status_message(result))
            return self._transport_failure(method, path, f"Malformed response: {e}")

        if is_envelope(payload):
            return payload
        if not result.ok:
            return self._transport_failure(method, path, self._status_message(result))
        return self._transport_failure(method, path, "Malformed response: missing envelope")

    @staticmethod
    def _status_message(result: HTTPResult) -> str:
        if result.reason:
            return f"HTTP {result.status}: {result.reason}"
        return f"HTTP {result.status}"

    def _transport_failure(self, method: str, path: str, message: str) -> dict[str, Any]:
        logger.warning(
            "Request failed without a backend envelope",
            extra={"method": method, "path": path, "error": message or FALLBACK_ERROR},
        )
        return failure_envelope(message)

    async def get_raw(self, path: str) -> Any:
        """Unauthenticated GET returning the decoded body.

        Raises:
            aiohttp.ClientError: On transport failure or non-2xx status
            asyncio.TimeoutError: When the configured timeout elapses
            ValueError: If the body is not JSON
        """
        return await self._http.get(path)

    async def close(self) -> None:
        await self._http.close()
