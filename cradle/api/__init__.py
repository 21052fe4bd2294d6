"""Cradle API - typed async client for the Cradle trading and lending back-end."""

from .client import CradleClient
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, ClientConfig
from .core import (
    AccountStatus,
    AccountType,
    AssetType,
    ConfigurationError,
    CradleError,
    DataProviderType,
    FillMode,
    HealthCheckError,
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
from .models import (
    ApiResponse,
    Asset,
    CradleAccount,
    CradleWallet,
    HealthResponse,
    LendingPool,
    Loan,
    Market,
    MarketFilters,
    Order,
    OrderFilters,
    TimeSeriesFilters,
    TimeSeriesRecord,
)
from .mutations import MutationAction, MutationResponse, UnknownMutationResponse

__version__ = "0.1.0"

__all__ = [
    # Client
    "CradleClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    # Enums
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
    # Exceptions
    "CradleError",
    "ConfigurationError",
    "HealthCheckError",
    # Models
    "ApiResponse",
    "Asset",
    "CradleAccount",
    "CradleWallet",
    "HealthResponse",
    "LendingPool",
    "Loan",
    "Market",
    "MarketFilters",
    "Order",
    "OrderFilters",
    "TimeSeriesFilters",
    "TimeSeriesRecord",
    # Mutations
    "MutationAction",
    "MutationResponse",
    "UnknownMutationResponse",
]
