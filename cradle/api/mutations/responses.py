"""Mutation responses returned by the ``/process`` endpoint.

Architecture:
    Each class is one branch of the closed ``MutationResponse`` union. The
    back-end decides which branch it returns; it normally mirrors the
    submitted action but the client does not check that.

    Responses whose tags name no known operation become
    ``UnknownMutationResponse`` instead of failing, so callers can still
    inspect them. Every ``is_*`` predicate is false for that branch.

    The ``is_*`` predicates are ``TypeGuard``s: after ``if
    is_create_account(resp):`` a type checker knows ``resp.result`` is the
    new account id.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any, ClassVar, TypeGuard, Union

from pydantic import BaseModel, ConfigDict, PlainValidator

from ..core.enums import OrderFillStatus, Subsystem
from .base import TaggedMutation, build_registry, split_tags

logger = logging.getLogger(__name__)


class PlaceOrderResult(BaseModel):
    """Outcome of matching a newly placed order against the book."""

    id: str
    status: OrderFillStatus
    bid_amount_filled: str
    ask_amount_filled: str
    matched_trades: list[str]

    model_config = ConfigDict(frozen=True)


class MutationResponseBase(TaggedMutation):
    """Common base of all known response variants; subclasses declare ``result``."""

    pass


class CreateAccountResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ACCOUNTS
    operation: ClassVar[str] = "CreateAccount"

    result: str


class UpdateAccountStatusResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ACCOUNTS
    operation: ClassVar[str] = "UpdateAccountStatus"

    result: None = None


class CreateWalletResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ACCOUNTS
    operation: ClassVar[str] = "CreateWallet"

    result: str


class CreateAssetResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ASSETS
    operation: ClassVar[str] = "CreateAsset"

    result: str


class CreateExistingAssetResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ASSETS
    operation: ClassVar[str] = "CreateExistingAsset"

    result: str


class CreateMarketResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.MARKETS
    operation: ClassVar[str] = "CreateMarket"

    result: str


class UpdateMarketStatusResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.MARKETS
    operation: ClassVar[str] = "UpdateMarketStatus"

    result: None = None


class PlaceOrderResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ORDER_BOOK
    operation: ClassVar[str] = "PlaceOrder"

    result: PlaceOrderResult


class CancelOrderResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.ORDER_BOOK
    operation: ClassVar[str] = "CancelOrder"

    result: None = None


class AddRecordResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.MARKET_TIME_SERIES
    operation: ClassVar[str] = "AddRecord"

    result: str


class CreateLendingPoolResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.POOL
    operation: ClassVar[str] = "CreateLendingPool"

    result: str


class SupplyLiquidityResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.POOL
    operation: ClassVar[str] = "SupplyLiquidity"

    result: str


class WithdrawLiquidityResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.POOL
    operation: ClassVar[str] = "WithdrawLiquidity"

    result: str


class BorrowAssetResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.POOL
    operation: ClassVar[str] = "BorrowAsset"

    result: str


class RepayBorrowResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.POOL
    operation: ClassVar[str] = "RepayBorrow"

    result: None = None


class CreateRepaymentResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.LOANS
    operation: ClassVar[str] = "CreateRepayment"

    result: str


class CreateLiquidationResponse(MutationResponseBase):
    subsystem: ClassVar[Subsystem] = Subsystem.LOANS
    operation: ClassVar[str] = "CreateLiquidation"

    result: str


class UnknownMutationResponse(BaseModel):
    """Well-formed response whose tags match no known operation."""

    subsystem: str
    operation: str
    result: Any = None

    model_config = ConfigDict(frozen=True)


MutationResponse = Union[
    CreateAccountResponse,
    UpdateAccountStatusResponse,
    CreateWalletResponse,
    CreateAssetResponse,
    CreateExistingAssetResponse,
    CreateMarketResponse,
    UpdateMarketStatusResponse,
    PlaceOrderResponse,
    CancelOrderResponse,
    AddRecordResponse,
    CreateLendingPoolResponse,
    SupplyLiquidityResponse,
    WithdrawLiquidityResponse,
    BorrowAssetResponse,
    RepayBorrowResponse,
    CreateRepaymentResponse,
    CreateLiquidationResponse,
    UnknownMutationResponse,
]

RESPONSE_VARIANTS: tuple[type[MutationResponseBase], ...] = (
    CreateAccountResponse,
    UpdateAccountStatusResponse,
    CreateWalletResponse,
    CreateAssetResponse,
    CreateExistingAssetResponse,
    CreateMarketResponse,
    UpdateMarketStatusResponse,
    PlaceOrderResponse,
    CancelOrderResponse,
    AddRecordResponse,
    CreateLendingPoolResponse,
    SupplyLiquidityResponse,
    WithdrawLiquidityResponse,
    BorrowAssetResponse,
    RepayBorrowResponse,
    CreateRepaymentResponse,
    CreateLiquidationResponse,
)

_RESPONSE_REGISTRY = build_registry(RESPONSE_VARIANTS)


def parse_mutation_response(value: Any) -> MutationResponse:
    """Build the response variant for a wire-form mutation response.

    Already-parsed variants are returned unchanged.

    Raises:
        ValueError: If ``value`` is not two nested single-key objects
        pydantic.ValidationError: If a known operation's result has the wrong shape
    """
    if isinstance(value, (MutationResponseBase, UnknownMutationResponse)):
        return value

    subsystem, operation, result = split_tags(value)
    variant = _RESPONSE_REGISTRY.get((subsystem, operation))
    if variant is None:
        logger.warning(
            "Unrecognized mutation response tags",
            extra={"subsystem": subsystem, "operation": operation},
        )
        return UnknownMutationResponse(subsystem=subsystem, operation=operation, result=result)
    return variant(result=result)


# Field type for envelopes carrying a mutation response
WireMutationResponse = Annotated[MutationResponse, PlainValidator(parse_mutation_response)]


def is_create_account(response: MutationResponse) -> TypeGuard[CreateAccountResponse]:
    return isinstance(response, CreateAccountResponse)


def is_update_account_status(
    response: MutationResponse,
) -> TypeGuard[UpdateAccountStatusResponse]:
    return isinstance(response, UpdateAccountStatusResponse)


def is_create_wallet(response: MutationResponse) -> TypeGuard[CreateWalletResponse]:
    return isinstance(response, CreateWalletResponse)


def is_create_asset(response: MutationResponse) -> TypeGuard[CreateAssetResponse]:
    return isinstance(response, CreateAssetResponse)


def is_create_existing_asset(
    response: MutationResponse,
) -> TypeGuard[CreateExistingAssetResponse]:
    return isinstance(response, CreateExistingAssetResponse)


def is_create_market(response: MutationResponse) -> TypeGuard[CreateMarketResponse]:
    return isinstance(response, CreateMarketResponse)


def is_update_market_status(
    response: MutationResponse,
) -> TypeGuard[UpdateMarketStatusResponse]:
    return isinstance(response, UpdateMarketStatusResponse)


def is_place_order(response: MutationResponse) -> TypeGuard[PlaceOrderResponse]:
    return isinstance(response, PlaceOrderResponse)


def is_cancel_order(response: MutationResponse) -> TypeGuard[CancelOrderResponse]:
    return isinstance(response, CancelOrderResponse)


def is_add_record(response: MutationResponse) -> TypeGuard[AddRecordResponse]:
    return isinstance(response, AddRecordResponse)


def is_create_lending_pool(response: MutationResponse) -> TypeGuard[CreateLendingPoolResponse]:
    return isinstance(response, CreateLendingPoolResponse)


def is_supply_liquidity(response: MutationResponse) -> TypeGuard[SupplyLiquidityResponse]:
    return isinstance(response, SupplyLiquidityResponse)


def is_withdraw_liquidity(response: MutationResponse) -> TypeGuard[WithdrawLiquidityResponse]:
    return isinstance(response, WithdrawLiquidityResponse)


def is_borrow_asset(response: MutationResponse) -> TypeGuard[BorrowAssetResponse]:
    return isinstance(response, BorrowAssetResponse)


def is_repay_borrow(response: MutationResponse) -> TypeGuard[RepayBorrowResponse]:
    return isinstance(response, RepayBorrowResponse)


def is_create_repayment(response: MutationResponse) -> TypeGuard[CreateRepaymentResponse]:
    return isinstance(response, CreateRepaymentResponse)


def is_create_liquidation(response: MutationResponse) -> TypeGuard[CreateLiquidationResponse]:
    return isinstance(response, CreateLiquidationResponse)
