"""Data models for Cradle API payloads.

Architecture:
    This module exports the Pydantic v2 models for every record the Cradle
    back-end returns, the filter objects used to build query strings, and
    the generic response envelope. All models are frozen: each call returns
    a fresh, independent snapshot that the client never mutates. Entity
    records keep fields they do not declare, so newer back-end payloads
    pass through intact.

Model Categories:
    - Envelope: ApiResponse, HealthResponse
    - Accounts: CradleAccount, CradleWallet
    - Trading: Asset, Market, Order, TimeSeriesRecord
    - Lending: LendingPool, LendingPoolSnapshot, LendingTransaction, Loan,
      LoanRepayment, LoanLiquidation and the pool read models
    - Filters: MarketFilters, OrderFilters, TimeSeriesFilters
"""

from .accounts import CradleAccount, CradleWallet
from .assets import AirdropRequest, Asset
from .envelope import ApiResponse, HealthResponse
from .filters import MarketFilters, OrderFilters, TimeSeriesFilters
from .lending import (
    BorrowPosition,
    CollateralInfo,
    InterestRateModel,
    InterestRates,
    LendingPool,
    LendingPoolSnapshot,
    LendingTransaction,
    Loan,
    LoanDetail,
    LoanLiquidation,
    LoanRepayment,
    PoolMetrics,
    PoolStatistics,
    RateConfiguration,
    RecentRepayment,
    RepaymentHistory,
    RiskParameters,
    UserPositions,
)
from .markets import Market, Order
from .time_series import TimeSeriesRecord

__all__ = [
    "AirdropRequest",
    "ApiResponse",
    "Asset",
    "BorrowPosition",
    "CollateralInfo",
    "CradleAccount",
    "CradleWallet",
    "HealthResponse",
    "InterestRateModel",
    "InterestRates",
    "LendingPool",
    "LendingPoolSnapshot",
    "LendingTransaction",
    "Loan",
    "LoanDetail",
    "LoanLiquidation",
    "LoanRepayment",
    "Market",
    "MarketFilters",
    "Order",
    "OrderFilters",
    "PoolMetrics",
    "PoolStatistics",
    "RateConfiguration",
    "RecentRepayment",
    "RepaymentHistory",
    "RiskParameters",
    "TimeSeriesFilters",
    "TimeSeriesRecord",
    "UserPositions",
]
