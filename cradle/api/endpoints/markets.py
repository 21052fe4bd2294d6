"""Market and order endpoints."""

from __future__ import annotations

from typing import Any

from cradle.api.models import Market, Order
from cradle.api.runtime.rest import RestEndpointSpec

from ._params import collect

MARKET_FILTER_KEYS = (
    ("market_type", "market_type"),
    ("status", "status"),
    ("regulation", "regulation"),
)

ORDER_FILTER_KEYS = (
    ("wallet", "wallet"),
    ("market_id", "market_id"),
    ("status", "status"),
    ("order_type", "order_type"),
    ("from_date", "from_date"),
    ("to_date", "to_date"),
)


def build_markets_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the market listing."""
    return collect(params.get("filters"), MARKET_FILTER_KEYS)


def build_orders_query(params: dict[str, Any]) -> dict[str, Any]:
    """Build query parameters for the order listing."""
    return collect(params.get("filters"), ORDER_FILTER_KEYS)


MARKET = RestEndpointSpec(
    id="market",
    method="GET",
    build_path=lambda p: f"/markets/{p['id']}",
    result_type=Market,
)

MARKETS = RestEndpointSpec(
    id="markets",
    method="GET",
    build_path=lambda p: "/markets",
    build_query=build_markets_query,
    result_type=list[Market],
)

ORDER = RestEndpointSpec(
    id="order",
    method="GET",
    build_path=lambda p: f"/orders/{p['id']}",
    result_type=Order,
)

ORDERS = RestEndpointSpec(
    id="orders",
    method="GET",
    build_path=lambda p: "/orders",
    build_query=build_orders_query,
    result_type=list[Order],
)

SPECS = (MARKET, MARKETS, ORDER, ORDERS)
