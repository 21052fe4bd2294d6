"""Helpers shared by endpoint path and query builders."""

from __future__ import annotations

from enum import Enum
from typing import Any


def wire_value(value: Any) -> Any:
    """Render enums as their wire string; pass other values through."""
    if isinstance(value, Enum):
        return value.value
    return value


def collect(filters: Any, keys: tuple[tuple[str, str], ...]) -> dict[str, Any]:
    """Collect set filter fields into an ordered query dict.

    Args:
        filters: Filter model (or None for no filtering)
        keys: (attribute, query key) pairs in the order they are sent

    Returns:
        Query dict holding only truthy fields, in ``keys`` order
    """
    q: dict[str, Any] = {}
    if filters is None:
        return q
    for attr, key in keys:
        value = getattr(filters, attr, None)
        if value:
            q[key] = wire_value(value)
    return q
