"""Core components."""

from .enums import (
    AccountStatus,
    AccountType,
    AssetType,
    DataProviderType,
    FillMode,
    LoanStatus,
    MarketRegulation,
    MarketStatus,
    MarketType,
    OrderFillStatus,
    OrderStatus,
    OrderType,
    PoolTransactionType,
    Subsystem,
    TimeSeriesInterval,
    WalletStatus,
)
from .exceptions import ConfigurationError, CradleError, HealthCheckError

__all__ = [
    "AccountStatus",
    "AccountType",
    "AssetType",
    "DataProviderType",
    "FillMode",
    "LoanStatus",
    "MarketRegulation",
    "MarketStatus",
    "MarketType",
    "OrderFillStatus",
    "OrderStatus",
    "OrderType",
    "PoolTransactionType",
    "Subsystem",
    "TimeSeriesInterval",
    "WalletStatus",
    "CradleError",
    "ConfigurationError",
    "HealthCheckError",
]
