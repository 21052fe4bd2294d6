"""Input payloads carried by mutation actions.

Field names match the back-end's JSON keys. Token amounts on pool
operations are integers in the asset's smallest unit; every other amount,
price or rate is a decimal string.
"""

from pydantic import BaseModel, ConfigDict

from ..core.enums import (
    AccountStatus,
    AccountType,
    AssetType,
    DataProviderType,
    FillMode,
    MarketRegulation,
    MarketStatus,
    MarketType,
    OrderType,
    TimeSeriesInterval,
)


class CreateAccountInput(BaseModel):
    linked_account_id: str
    account_type: AccountType

    model_config = ConfigDict(frozen=True)


class UpdateAccountStatusInput(BaseModel):
    account_id: str
    status: AccountStatus

    model_config = ConfigDict(frozen=True)


class CreateWalletInput(BaseModel):
    cradle_account_id: str
    address: str
    contract_id: str

    model_config = ConfigDict(frozen=True)


class CreateAssetInput(BaseModel):
    asset_manager: str
    token: str
    asset_type: AssetType
    name: str
    symbol: str
    decimals: int
    icon: str

    model_config = ConfigDict(frozen=True)


class CreateMarketInput(BaseModel):
    name: str
    description: str
    icon: str
    asset_one: str
    asset_two: str
    market_type: MarketType
    market_status: MarketStatus
    market_regulation: MarketRegulation

    model_config = ConfigDict(frozen=True)


class UpdateMarketStatusInput(BaseModel):
    market_id: str
    status: MarketStatus

    model_config = ConfigDict(frozen=True)


class PlaceOrderInput(BaseModel):
    wallet: str
    market_id: str
    bid_asset: str
    ask_asset: str
    bid_amount: str
    ask_amount: str
    price: str
    mode: FillMode
    order_type: OrderType

    model_config = ConfigDict(frozen=True)


class AddTimeSeriesRecordInput(BaseModel):
    market_id: str
    asset: str
    open: str
    high: str
    low: str
    close: str
    volume: str
    start_time: str
    end_time: str
    interval: TimeSeriesInterval
    data_provider_type: DataProviderType
    data_provider: str

    model_config = ConfigDict(frozen=True)


class CreateLendingPoolInput(BaseModel):
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
    name: str
    title: str
    description: str

    model_config = ConfigDict(frozen=True)


class SupplyLiquidityInput(BaseModel):
    wallet: str
    pool: str
    amount: int

    model_config = ConfigDict(frozen=True)


class WithdrawLiquidityInput(BaseModel):
    wallet: str
    pool: str
    amount: int

    model_config = ConfigDict(frozen=True)


class BorrowAssetInput(BaseModel):
    """Borrow ``amount`` from ``pool`` against the ``collateral`` asset."""

    wallet: str
    pool: str
    amount: int
    collateral: str

    model_config = ConfigDict(frozen=True)


class RepayBorrowInput(BaseModel):
    wallet: str
    loan: str
    amount: int

    model_config = ConfigDict(frozen=True)


class CreateLoanRepaymentInput(BaseModel):
    loan_id: str
    repayment_amount: str
    transaction: str | None = None

    model_config = ConfigDict(frozen=True)


class CreateLoanLiquidationInput(BaseModel):
    loan_id: str
    liquidator_wallet_id: str
    liquidation_amount: str
    transaction: str | None = None

    model_config = ConfigDict(frozen=True)
