"""Cradle REST endpoint registry.

This module collects the endpoint specifications from the per-domain
modules and exposes them by id.
"""

from __future__ import annotations

from cradle.api.runtime.rest import RestEndpointSpec

from . import accounts, assets, loans, markets, mutations, pools, time_series

_ENDPOINT_REGISTRY: dict[str, RestEndpointSpec] = {}
for _module in (accounts, assets, markets, time_series, pools, loans, mutations):
    for _spec in _module.SPECS:
        if _spec.id in _ENDPOINT_REGISTRY:
            raise ValueError(f"Duplicate endpoint id: {_spec.id}")
        _ENDPOINT_REGISTRY[_spec.id] = _spec


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Endpoint identifier (e.g., "markets", "process")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    return _ENDPOINT_REGISTRY.get(endpoint_id)


def list_endpoints() -> list[str]:
    """List all registered endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "get_endpoint_spec",
    "list_endpoints",
]
