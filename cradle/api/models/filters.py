"""Optional filter sets used to build list-endpoint query strings.

Every field is independently optional; an unset field places no constraint
on the listing and never appears in the query string. Nothing here is
validated client-side beyond the field types.
"""

from pydantic import BaseModel, ConfigDict

from ..core.enums import (
    MarketRegulation,
    MarketStatus,
    MarketType,
    OrderStatus,
    OrderType,
    TimeSeriesInterval,
)


class MarketFilters(BaseModel):
    market_type: MarketType | None = None
    status: MarketStatus | None = None
    regulation: MarketRegulation | None = None

    model_config = ConfigDict(frozen=True)


class OrderFilters(BaseModel):
    wallet: str | None = None
    market_id: str | None = None
    status: OrderStatus | None = None
    order_type: OrderType | None = None
    from_date: str | None = None
    to_date: str | None = None

    model_config = ConfigDict(frozen=True)


class TimeSeriesFilters(BaseModel):
    market_id: str | None = None
    asset: str | None = None
    interval: TimeSeriesInterval | None = None
    start_time: str | None = None
    end_time: str | None = None
    data_provider: str | None = None

    model_config = ConfigDict(frozen=True)
