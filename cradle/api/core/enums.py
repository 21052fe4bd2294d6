"""Core enumerations for the values the Cradle back-end exchanges.

Architecture:
    Every closed set of strings that appears in a Cradle payload is modelled
    as a string enum. Members compare equal to their wire value, so they can
    be passed anywhere a plain string is accepted and serialize unchanged.

Key Types:
    - Account/wallet lifecycle: AccountType, AccountStatus, WalletStatus
    - Trading: AssetType, MarketType, MarketStatus, MarketRegulation,
      OrderType, OrderStatus, FillMode, OrderFillStatus
    - Market data: TimeSeriesInterval, DataProviderType
    - Lending: LoanStatus, PoolTransactionType
    - Mutations: Subsystem (outer tag of a mutation action/response)
"""

from enum import Enum


class AccountType(str, Enum):
    RETAIL = "retail"
    INSTITUTIONAL = "institutional"


class AccountStatus(str, Enum):
    UNVERIFIED = "unverified"
    VERIFIED = "verified"
    SUSPENDED = "suspended"
    CLOSED = "closed"


class WalletStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class AssetType(str, Enum):
    BRIDGED = "bridged"
    NATIVE = "native"
    YIELD_BREAKING = "yield_breaking"
    CHAIN_NATIVE = "chain_native"
    STABLECOIN = "stablecoin"
    VOLATILE = "volatile"


class MarketStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class MarketType(str, Enum):
    SPOT = "spot"
    DERIVATIVE = "derivative"
    FUTURES = "futures"


class MarketRegulation(str, Enum):
    REGULATED = "regulated"
    UNREGULATED = "unregulated"


class OrderStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    CANCELLED = "cancelled"


class OrderType(str, Enum):
    LIMIT = "limit"
    MARKET = "market"


class FillMode(str, Enum):
    """How an order may be filled against the book."""

    FILL_OR_KILL = "fill-or-kill"
    IMMEDIATE_OR_CANCEL = "immediate-or-cancel"
    GOOD_TILL_CANCEL = "good-till-cancel"


class OrderFillStatus(str, Enum):
    """Fill outcome reported when an order is placed."""

    PARTIAL = "partial"
    FILLED = "filled"
    CANCELLED = "cancelled"


class TimeSeriesInterval(str, Enum):
    M1 = "1min"
    M5 = "5min"
    M15 = "15min"
    M30 = "30min"
    H1 = "1hr"
    H4 = "4hr"
    D1 = "1day"
    W1 = "1week"


class DataProviderType(str, Enum):
    ORDER_BOOK = "order_book"
    EXCHANGE = "exchange"
    AGGREGATED = "aggregated"


class LoanStatus(str, Enum):
    ACTIVE = "active"
    REPAID = "repaid"
    LIQUIDATED = "liquidated"


class PoolTransactionType(str, Enum):
    SUPPLY = "supply"
    WITHDRAW = "withdraw"


class Subsystem(str, Enum):
    """Outer tag of a mutation: the back-end subsystem that handles it."""

    ACCOUNTS = "Accounts"
    ASSETS = "Assets"
    MARKETS = "Markets"
    ORDER_BOOK = "OrderBook"
    MARKET_TIME_SERIES = "MarketTimeSeries"
    POOL = "Pool"
    LOANS = "Loans"
