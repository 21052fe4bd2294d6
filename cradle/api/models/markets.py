"""Market and order records."""

from pydantic import BaseModel, ConfigDict

from ..core.enums import (
    FillMode,
    MarketRegulation,
    MarketStatus,
    MarketType,
    OrderStatus,
    OrderType,
)


class Market(BaseModel):
    """Trading pair between ``asset_one`` and ``asset_two`` (asset ids)."""

    id: str
    name: str
    description: str
    icon: str
    asset_one: str
    asset_two: str
    created_at: str
    market_type: MarketType
    market_status: MarketStatus
    market_regulation: MarketRegulation

    model_config = ConfigDict(frozen=True, extra="allow")


class Order(BaseModel):
    """Order resting on (or removed from) a market's book.

    Amounts and price are decimal strings as sent by the back-end.
    """

    id: str
    wallet: str
    market_id: str
    bid_asset: str
    ask_asset: str
    bid_amount: str
    ask_amount: str
    price: str
    mode: FillMode
    order_type: OrderType
    status: OrderStatus
    created_at: str

    model_config = ConfigDict(frozen=True, extra="allow")
