"""Lending pool, loan and pool read-model records.

Architecture:
    Pool parameters (rates, ratios, thresholds) and amounts are decimal
    strings exactly as the back-end sends them. The read models at the bottom
    of the module (InterestRates, CollateralInfo, PoolStatistics,
    UserPositions) are views computed server-side from the pool contract and
    loan tables; they have no identity of their own.
"""

from pydantic import BaseModel, ConfigDict

from ..core.enums import LoanStatus, PoolTransactionType


class LendingPool(BaseModel):
    id: str
    pool_address: str
    pool_contract_id: str
    reserve_asset: str
    loan_to_value: str
    base_rate: str
    slope1: str
    slope2: str
    liquidation_threshold: str
    liquidation_discount: str
    reserve_factor: str
    name: str | None = None
    title: str | None = None
    description: str | None = None
    created_at: str
    updated_at: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class LendingPoolSnapshot(BaseModel):
    """Latest utilization and APY metrics for a pool."""

    id: str
    lending_pool_id: str
    total_supply: str
    total_borrow: str
    available_liquidity: str
    utilization_rate: str
    supply_apy: str
    borrow_apy: str
    created_at: str

    model_config = ConfigDict(frozen=True, extra="allow")


class LendingTransaction(BaseModel):
    id: str
    wallet: str
    pool: str
    amount: int
    transaction_type: PoolTransactionType
    created_at: str

    model_config = ConfigDict(frozen=True, extra="allow")


class Loan(BaseModel):
    id: str
    account_id: str
    wallet_id: str
    pool: str
    borrow_index: str
    principal_amount: str
    created_at: str
    status: LoanStatus
    transaction: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class LoanRepayment(BaseModel):
    id: str
    loan_id: str
    repayment_amount: str
    repayment_date: str
    transaction: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class LoanLiquidation(BaseModel):
    id: str
    loan_id: str
    liquidator_wallet_id: str
    liquidation_amount: str
    liquidation_date: str
    transaction: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class InterestRateModel(BaseModel):
    description: str
    slope1_threshold: str
    slope1_rate: str
    slope2_rate: str

    model_config = ConfigDict(frozen=True, extra="allow")


class InterestRates(BaseModel):
    pool_id: str
    base_rate: str
    slope1: str
    slope2: str
    reserve_factor: str
    interest_rate_model: InterestRateModel

    model_config = ConfigDict(frozen=True, extra="allow")


class RiskParameters(BaseModel):
    ltv: str
    liquidation_threshold: str
    liquidation_penalty: str

    model_config = ConfigDict(frozen=True, extra="allow")


class CollateralInfo(BaseModel):
    pool_id: str
    loan_to_value: str
    liquidation_threshold: str
    liquidation_discount: str
    risk_parameters: RiskParameters

    model_config = ConfigDict(frozen=True, extra="allow")


class PoolMetrics(BaseModel):
    """Pool metrics; every field is null until the first snapshot exists."""

    total_supply: str | None = None
    total_borrow: str | None = None
    available_liquidity: str | None = None
    utilization_rate: str | None = None
    supply_apy: str | None = None
    borrow_apy: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class RateConfiguration(BaseModel):
    base_rate: str
    slope1: str
    slope2: str

    model_config = ConfigDict(frozen=True, extra="allow")


class PoolStatistics(BaseModel):
    pool_id: str
    pool_name: str
    pool_address: str
    reserve_asset: str
    metrics: PoolMetrics
    last_updated: str | None = None
    note: str | None = None
    rate_configuration: RateConfiguration

    model_config = ConfigDict(frozen=True, extra="allow")


class LoanDetail(BaseModel):
    loan_id: str
    principal_amount: str
    status: str
    created_at: str

    model_config = ConfigDict(frozen=True, extra="allow")


class BorrowPosition(BaseModel):
    active_loans_count: int
    total_borrow_amount: str
    loans: list[LoanDetail]

    model_config = ConfigDict(frozen=True, extra="allow")


class RecentRepayment(BaseModel):
    repayment_amount: str
    repayment_date: str

    model_config = ConfigDict(frozen=True, extra="allow")


class RepaymentHistory(BaseModel):
    total_repaid: str
    repayment_count: int
    recent_repayments: list[RecentRepayment]

    model_config = ConfigDict(frozen=True, extra="allow")


class UserPositions(BaseModel):
    """Borrow position and repayment history of one wallet in one pool."""

    pool_id: str
    wallet_id: str
    borrow_position: BorrowPosition
    repayment_history: RepaymentHistory

    model_config = ConfigDict(frozen=True, extra="allow")
