"""Shared Cradle client configuration.

This module centralizes the default endpoint, timeout, fixed paths and
headers used by the transport and the endpoint catalog, plus the immutable
``ClientConfig`` value every request path is built from.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .core.exceptions import ConfigurationError

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_TIMEOUT_MS = 30000

HEALTH_PATH = "/health"
MUTATION_PATH = "/process"
FAUCET_PATH = "/faucet"

# Tunnelled dev deployments (ngrok) serve an interstitial page to browsers
# unless this header is present. Any value works.
TUNNEL_BYPASS_HEADER = "ngrok-skip-browser-warning"
TUNNEL_BYPASS_VALUE = "6969"

# Environment variables read by ClientConfig.from_env()
ENV_API_KEY = "CRADLE_API_KEY"
ENV_API_KEY_FALLBACK = "API_SECRET_KEY"
ENV_BASE_URL = "CRADLE_API_URL"
ENV_TIMEOUT_MS = "CRADLE_API_TIMEOUT_MS"


@dataclass(frozen=True)
class ClientConfig:
    """Connection profile for one Cradle back-end.

    Frozen so a single instance can be shared by any number of concurrent
    requests.

    Args:
        api_key: Bearer token sent on every authenticated request
        base_url: Back-end root URL, without trailing slash
        timeout_ms: Total timeout per request in milliseconds
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("api_key is required")
        if not self.base_url:
            raise ConfigurationError("base_url must not be empty")
        if self.timeout_ms <= 0:
            raise ConfigurationError(f"timeout_ms must be positive, got {self.timeout_ms}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from environment variables.

        Reads ``CRADLE_API_KEY`` (falling back to ``API_SECRET_KEY``),
        ``CRADLE_API_URL`` and ``CRADLE_API_TIMEOUT_MS``. Unset optional
        values keep their defaults.

        Raises:
            ConfigurationError: If no API key is set or the timeout is not an integer
        """
        env = os.environ if environ is None else environ
        api_key = env.get(ENV_API_KEY) or env.get(ENV_API_KEY_FALLBACK) or ""
        base_url = env.get(ENV_BASE_URL) or DEFAULT_BASE_URL

        raw_timeout = env.get(ENV_TIMEOUT_MS)
        if raw_timeout:
            try:
                timeout_ms = int(raw_timeout)
            except ValueError as e:
                raise ConfigurationError(
                    f"{ENV_TIMEOUT_MS} must be an integer, got {raw_timeout!r}"
                ) from e
        else:
            timeout_ms = DEFAULT_TIMEOUT_MS

        return cls(api_key=api_key, base_url=base_url, timeout_ms=timeout_ms)
