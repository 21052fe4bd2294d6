"""Mutation actions submitted to the ``/process`` endpoint.

Each class is one branch of the closed ``MutationAction`` union and wraps
the input payload for a single back-end operation. ``to_wire()`` produces
the nested tag form the back-end expects.
"""

from __future__ import annotations

from typing import Any, ClassVar, Union

from ..core.enums import Subsystem
from .base import TaggedMutation, build_registry, split_tags
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


class MutationActionBase(TaggedMutation):
    """Common behaviour of all action variants; subclasses declare ``payload``."""

    def to_wire(self) -> dict[str, Any]:
        """Serialize as ``{subsystem: {operation: payload}}``.

        Unset optional input fields are omitted from the payload.
        """
        payload = self.model_dump(mode="json", exclude_none=True)["payload"]
        return {self.subsystem.value: {self.operation: payload}}


# Accounts


class CreateAccountAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ACCOUNTS
    operation: ClassVar[str] = "CreateAccount"

    payload: CreateAccountInput


class UpdateAccountStatusAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ACCOUNTS
    operation: ClassVar[str] = "UpdateAccountStatus"

    payload: UpdateAccountStatusInput


class CreateWalletAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ACCOUNTS
    operation: ClassVar[str] = "CreateWallet"

    payload: CreateWalletInput


# Assets


class CreateAssetAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ASSETS
    operation: ClassVar[str] = "CreateAsset"

    payload: CreateAssetInput


class CreateExistingAssetAction(MutationActionBase):
    """Register an asset that already exists on-chain, by its identifier."""

    subsystem: ClassVar[Subsystem] = Subsystem.ASSETS
    operation: ClassVar[str] = "CreateExistingAsset"

    payload: str


# Markets


class CreateMarketAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.MARKETS
    operation: ClassVar[str] = "CreateMarket"

    payload: CreateMarketInput


class UpdateMarketStatusAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.MARKETS
    operation: ClassVar[str] = "UpdateMarketStatus"

    payload: UpdateMarketStatusInput


# Order book


class PlaceOrderAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ORDER_BOOK
    operation: ClassVar[str] = "PlaceOrder"

    payload: PlaceOrderInput


class CancelOrderAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ORDER_BOOK
    operation: ClassVar[str] = "CancelOrder"

    payload: str


# Time series


class AddRecordAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.MARKET_TIME_SERIES
    operation: ClassVar[str] = "AddRecord"

    payload: AddTimeSeriesRecordInput


# Lending pools


class CreateLendingPoolAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.POOL
    operation: ClassVar[str] = "CreateLendingPool"

    payload: CreateLendingPoolInput


class SupplyLiquidityAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.POOL
    operation: ClassVar[str] = "SupplyLiquidity"

    payload: SupplyLiquidityInput


class WithdrawLiquidityAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.POOL
    operation: ClassVar[str] = "WithdrawLiquidity"

    payload: WithdrawLiquidityInput


class BorrowAssetAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.POOL
    operation: ClassVar[str] = "BorrowAsset"

    payload: BorrowAssetInput


class RepayBorrowAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.POOL
    operation: ClassVar[str] = "RepayBorrow"

    payload: RepayBorrowInput


# Loans


class CreateRepaymentAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.LOANS
    operation: ClassVar[str] = "CreateRepayment"

    payload: CreateLoanRepaymentInput


class CreateLiquidationAction(MutationActionBase):
    subsystem: ClassVar[Subsystem] = Subsystem.LOANS
    operation: ClassVar[str] = "CreateLiquidation"

    payload: CreateLoanLiquidationInput


MutationAction = Union[
    CreateAccountAction,
    UpdateAccountStatusAction,
    CreateWalletAction,
    CreateAssetAction,
    CreateExistingAssetAction,
    CreateMarketAction,
    UpdateMarketStatusAction,
    PlaceOrderAction,
    CancelOrderAction,
    AddRecordAction,
    CreateLendingPoolAction,
    SupplyLiquidityAction,
    WithdrawLiquidityAction,
    BorrowAssetAction,
    RepayBorrowAction,
    CreateRepaymentAction,
    CreateLiquidationAction,
]

ACTION_VARIANTS: tuple[type[MutationActionBase], ...] = (
    CreateAccountAction,
    UpdateAccountStatusAction,
    CreateWalletAction,
    CreateAssetAction,
    CreateExistingAssetAction,
    CreateMarketAction,
    UpdateMarketStatusAction,
    PlaceOrderAction,
    CancelOrderAction,
    AddRecordAction,
    CreateLendingPoolAction,
    SupplyLiquidityAction,
    WithdrawLiquidityAction,
    BorrowAssetAction,
    RepayBorrowAction,
    CreateRepaymentAction,
    CreateLiquidationAction,
)

_ACTION_REGISTRY = build_registry(ACTION_VARIANTS)


def parse_mutation_action(value: Any) -> MutationAction:
    """Build the action variant for a wire-form mutation action.

    Raises:
        ValueError: If the tags are malformed or name no known operation
        pydantic.ValidationError: If the payload does not fit the operation's input
    """
    subsystem, operation, payload = split_tags(value)
    variant = _ACTION_REGISTRY.get((subsystem, operation))
    if variant is None:
        raise ValueError(f"Unknown mutation action: {subsystem}.{operation}")
    return variant(payload=payload)
