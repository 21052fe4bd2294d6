"""Mutation actions, responses and narrowing predicates.

Example:
    >>> action = CreateAccountAction(
    ...     payload={"linked_account_id": "user-1", "account_type": "retail"}
    ... )
    >>> action.to_wire()
    {'Accounts': {'CreateAccount': {'linked_account_id': 'user-1', 'account_type': 'retail'}}}
"""

from .actions import (
    ACTION_VARIANTS,
    AddRecordAction,
    BorrowAssetAction,
    CancelOrderAction,
    CreateAccountAction,
    CreateAssetAction,
    CreateExistingAssetAction,
    CreateLendingPoolAction,
    CreateLiquidationAction,
    CreateMarketAction,
    CreateRepaymentAction,
    CreateWalletAction,
    MutationAction,
    MutationActionBase,
    PlaceOrderAction,
    RepayBorrowAction,
    SupplyLiquidityAction,
    UpdateAccountStatusAction,
    UpdateMarketStatusAction,
    WithdrawLiquidityAction,
    parse_mutation_action,
)
from .inputs import (
    AddTimeSeriesRecordInput,
    BorrowAssetInput,
    CreateAccountInput,
    CreateAssetInput,
    CreateLendingPoolInput,
    CreateLoanLiquidationInput,
    CreateLoanRepaymentInput,
    CreateMarketInput,
    CreateWalletInput,
    PlaceOrderInput,
    RepayBorrowInput,
    SupplyLiquidityInput,
    UpdateAccountStatusInput,
    UpdateMarketStatusInput,
    WithdrawLiquidityInput,
)
from .responses import (
    RESPONSE_VARIANTS,
    AddRecordResponse,
    BorrowAssetResponse,
    CancelOrderResponse,
    CreateAccountResponse,
    CreateAssetResponse,
    CreateExistingAssetResponse,
    CreateLendingPoolResponse,
    CreateLiquidationResponse,
    CreateMarketResponse,
    CreateRepaymentResponse,
    CreateWalletResponse,
    MutationResponse,
    MutationResponseBase,
    PlaceOrderResponse,
    PlaceOrderResult,
    RepayBorrowResponse,
    SupplyLiquidityResponse,
    UnknownMutationResponse,
    UpdateAccountStatusResponse,
    UpdateMarketStatusResponse,
    WireMutationResponse,
    WithdrawLiquidityResponse,
    is_add_record,
    is_borrow_asset,
    is_cancel_order,
    is_create_account,
    is_create_asset,
    is_create_existing_asset,
    is_create_lending_pool,
    is_create_liquidation,
    is_create_market,
    is_create_repayment,
    is_create_wallet,
    is_place_order,
    is_repay_borrow,
    is_supply_liquidity,
    is_update_account_status,
    is_update_market_status,
    is_withdraw_liquidity,
    parse_mutation_response,
)

__all__ = [
    # Actions
    "ACTION_VARIANTS",
    "AddRecordAction",
    "BorrowAssetAction",
    "CancelOrderAction",
    "CreateAccountAction",
    "CreateAssetAction",
    "CreateExistingAssetAction",
    "CreateLendingPoolAction",
    "CreateLiquidationAction",
    "CreateMarketAction",
    "CreateRepaymentAction",
    "CreateWalletAction",
    "MutationAction",
    "MutationActionBase",
    "PlaceOrderAction",
    "RepayBorrowAction",
    "SupplyLiquidityAction",
    "UpdateAccountStatusAction",
    "UpdateMarketStatusAction",
    "WithdrawLiquidityAction",
    "parse_mutation_action",
    # Inputs
    "AddTimeSeriesRecordInput",
    "BorrowAssetInput",
    "CreateAccountInput",
    "CreateAssetInput",
    "CreateLendingPoolInput",
    "CreateLoanLiquidationInput",
    "CreateLoanRepaymentInput",
    "CreateMarketInput",
    "CreateWalletInput",
    "PlaceOrderInput",
    "RepayBorrowInput",
    "SupplyLiquidityInput",
    "UpdateAccountStatusInput",
    "UpdateMarketStatusInput",
    "WithdrawLiquidityInput",
    # Responses
    "RESPONSE_VARIANTS",
    "AddRecordResponse",
    "BorrowAssetResponse",
    "CancelOrderResponse",
    "CreateAccountResponse",
    "CreateAssetResponse",
    "CreateExistingAssetResponse",
    "CreateLendingPoolResponse",
    "CreateLiquidationResponse",
    "CreateMarketResponse",
    "CreateRepaymentResponse",
    "CreateWalletResponse",
    "MutationResponse",
    "MutationResponseBase",
    "PlaceOrderResponse",
    "PlaceOrderResult",
    "RepayBorrowResponse",
    "SupplyLiquidityResponse",
    "UnknownMutationResponse",
    "UpdateAccountStatusResponse",
    "UpdateMarketStatusResponse",
    "WireMutationResponse",
    "WithdrawLiquidityResponse",
    "parse_mutation_response",
    # Predicates
    "is_add_record",
    "is_borrow_asset",
    "is_cancel_order",
    "is_create_account",
    "is_create_asset",
    "is_create_existing_asset",
    "is_create_lending_pool",
    "is_create_liquidation",
    "is_create_market",
    "is_create_repayment",
    "is_create_wallet",
    "is_place_order",
    "is_repay_borrow",
    "is_supply_liquidity",
    "is_update_account_status",
    "is_update_market_status",
    "is_withdraw_liquidity",
]
