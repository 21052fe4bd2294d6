"""Cradle REST API client.

Architecture:
    CradleClient is the typed surface of the library. Every read method is a
    thin projection onto a registered endpoint spec; every mutation method
    wraps its input in a tagged action and posts it to ``/process``. All of
    them return ``ApiResponse`` envelopes and never raise for backend or
    transport failures. Branch on ``response.success`` instead.

    ``health()`` is the one exception: it is an unauthenticated liveness
    probe and raises ``HealthCheckError`` when the back-end is unreachable
    or unhealthy.

Example:
    >>> async with CradleClient(api_key="secret") as client:
    ...     markets = await client.get_markets({"market_type": "spot"})
    ...     if markets.success:
    ...         for market in markets.data:
    ...             print(market.name)
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

import aiohttp
from pydantic import BaseModel

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, HEALTH_PATH, ClientConfig
from .core.enums import LoanStatus
from .core.exceptions import HealthCheckError
from .endpoints import get_endpoint_spec
from .models import (
    AirdropRequest,
    ApiResponse,
    Asset,
    CollateralInfo,
    CradleAccount,
    CradleWallet,
    HealthResponse,
    InterestRates,
    LendingPool,
    LendingPoolSnapshot,
    LendingTransaction,
    Loan,
    LoanLiquidation,
    LoanRepayment,
    Market,
    MarketFilters,
    Order,
    OrderFilters,
    PoolStatistics,
    TimeSeriesFilters,
    TimeSeriesRecord,
    UserPositions,
)
from .mutations import (
    AddRecordAction,
    AddTimeSeriesRecordInput,
    BorrowAssetAction,
    BorrowAssetInput,
    CancelOrderAction,
    CreateAccountAction,
    CreateAccountInput,
    CreateAssetAction,
    CreateAssetInput,
    CreateExistingAssetAction,
    CreateLendingPoolAction,
    CreateLendingPoolInput,
    CreateLiquidationAction,
    CreateLoanLiquidationInput,
    CreateLoanRepaymentInput,
    CreateMarketAction,
    CreateMarketInput,
    CreateRepaymentAction,
    CreateWalletAction,
    CreateWalletInput,
    MutationAction,
    MutationResponse,
    PlaceOrderAction,
    PlaceOrderInput,
    RepayBorrowAction,
    RepayBorrowInput,
    SupplyLiquidityAction,
    SupplyLiquidityInput,
    UpdateAccountStatusAction,
    UpdateAccountStatusInput,
    UpdateMarketStatusAction,
    UpdateMarketStatusInput,
    WithdrawLiquidityAction,
    WithdrawLiquidityInput,
    parse_mutation_action,
)
from .runtime.rest import RestRunner, RESTTransport

logger = logging.getLogger(__name__)

FilterT = TypeVar("FilterT", bound=BaseModel)


def _coerce_filters(
    model: type[FilterT], filters: FilterT | Mapping[str, Any] | None
) -> FilterT | None:
    if filters is None or isinstance(filters, model):
        return filters
    return model.model_validate(filters)


class CradleClient:
    """Async client for the Cradle back-end REST API.

    One instance holds one immutable ``ClientConfig`` and one pooled HTTP
    session; it is safe to issue any number of concurrent calls on it.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        config: ClientConfig | None = None,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Bearer token for authenticated endpoints
            base_url: Back-end root URL (default ``http://localhost:3000``)
            timeout_ms: Per-request timeout in milliseconds (default 30000)
            config: Prebuilt configuration; overrides the three arguments above
            transport: Prebuilt transport, mainly for tests

        Raises:
            ConfigurationError: If no API key is given
        """
        if config is None:
            config = ClientConfig(api_key=api_key or "", base_url=base_url, timeout_ms=timeout_ms)
        self.config = config
        self._transport = transport or RESTTransport(config)
        self._runner = RestRunner(self._transport)

    @classmethod
    def from_env(cls) -> CradleClient:
        """Create a client configured from ``CRADLE_*`` environment variables."""
        return cls(config=ClientConfig.from_env())

    async def fetch(
        self, endpoint_id: str, params: dict[str, Any] | None = None
    ) -> ApiResponse[Any]:
        """Call a registered endpoint by id.

        Args:
            endpoint_id: Endpoint identifier (e.g., "markets", "loan")
            params: Path, filter or body parameters for the endpoint

        Returns:
            Envelope typed to the endpoint's result

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        return await self._runner.run(spec=spec, params=params or {})

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    async def health(self) -> HealthResponse:
        """Check API liveness (no authentication, no envelope).

        Raises:
            HealthCheckError: If the back-end cannot be reached or is unhealthy
        """
        try:
            payload = await self._transport.get_raw(HEALTH_PATH)
            return HealthResponse.model_validate(payload)
        except aiohttp.ClientResponseError as e:
            raise HealthCheckError(
                f"Health check failed: HTTP {e.status}", status_code=e.status
            ) from e
        except asyncio.TimeoutError as e:
            raise HealthCheckError("Health check failed: timed out") from e
        except (aiohttp.ClientError, ValueError) as e:
            raise HealthCheckError(f"Health check failed: {e}") from e

    # ------------------------------------------------------------------
    # Accounts & wallets
    # ------------------------------------------------------------------

    async def get_account(self, id: str) -> ApiResponse[CradleAccount]:
        """Get a cradle account by UUID."""
        return await self.fetch("account", {"id": id})

    async def get_account_by_linked_id(self, linked_id: str) -> ApiResponse[CradleAccount]:
        """Get an account by its linked (external) account identifier."""
        return await self.fetch("account_by_linked_id", {"linked_id": linked_id})

    async def get_account_wallets(self, account_id: str) -> ApiResponse[list[CradleWallet]]:
        """Get all wallets for an account."""
        return await self.fetch("account_wallets", {"account_id": account_id})

    async def get_wallet(self, id: str) -> ApiResponse[CradleWallet]:
        return await self.fetch("wallet", {"id": id})

    async def get_wallet_by_account_id(self, account_id: str) -> ApiResponse[CradleWallet]:
        """Get the wallet owned by an account.

        Shares its path with ``get_account_wallets`` but expects a single wallet.
        """
        return await self.fetch("wallet_by_account_id", {"account_id": account_id})

    # ------------------------------------------------------------------
    # Assets
    # ------------------------------------------------------------------

    async def get_asset(self, id: str) -> ApiResponse[Asset]:
        return await self.fetch("asset", {"id": id})

    async def get_assets(self) -> ApiResponse[list[Asset]]:
        return await self.fetch("assets")

    async def get_asset_by_token(self, token: str) -> ApiResponse[Asset]:
        """Get an asset by its token identifier."""
        return await self.fetch("asset_by_token", {"token": token})

    async def get_asset_by_manager(self, manager: str) -> ApiResponse[Asset]:
        """Get an asset by its asset manager identifier."""
        return await self.fetch("asset_by_manager", {"manager": manager})

    async def airdrop(self, account: str, asset: str) -> ApiResponse[Any]:
        """Ask the faucet to credit ``asset`` to ``account``."""
        request = AirdropRequest(account=account, asset=asset)
        return await self.fetch("airdrop", {"request": request})

    # ------------------------------------------------------------------
    # Markets & orders
    # ------------------------------------------------------------------

    async def get_market(self, id: str) -> ApiResponse[Market]:
        return await self.fetch("market", {"id": id})

    async def get_markets(
        self, filters: MarketFilters | Mapping[str, Any] | None = None
    ) -> ApiResponse[list[Market]]:
        """Get all markets, optionally filtered by type, status and regulation."""
        return await self.fetch("markets", {"filters": _coerce_filters(MarketFilters, filters)})

    async def get_order(self, id: str) -> ApiResponse[Order]:
        return await self.fetch("order", {"id": id})

    async def get_orders(
        self, filters: OrderFilters | Mapping[str, Any] | None = None
    ) -> ApiResponse[list[Order]]:
        """Get all orders, optionally filtered by wallet, market, status, type and date range."""
        return await self.fetch("orders", {"filters": _coerce_filters(OrderFilters, filters)})

    # ------------------------------------------------------------------
    # Time series
    # ------------------------------------------------------------------

    async def get_time_series_record(self, id: str) -> ApiResponse[TimeSeriesRecord]:
        return await self.fetch("time_series_record", {"id": id})

    async def get_time_series_records(
        self, filters: TimeSeriesFilters | Mapping[str, Any] | None = None
    ) -> ApiResponse[list[TimeSeriesRecord]]:
        """Get time series records, optionally filtered by market, asset, interval and provider."""
        return await self.fetch(
            "time_series_records", {"filters": _coerce_filters(TimeSeriesFilters, filters)}
        )

    # ------------------------------------------------------------------
    # Lending pools
    # ------------------------------------------------------------------

    async def get_lending_pool(self, id: str) -> ApiResponse[LendingPool]:
        return await self.fetch("lending_pool", {"id": id})

    async def get_lending_pools(self) -> ApiResponse[list[LendingPool]]:
        return await self.fetch("lending_pools")

    async def get_lending_pool_by_name(self, name: str) -> ApiResponse[LendingPool]:
        return await self.fetch("lending_pool_by_name", {"name": name})

    async def get_lending_pool_by_address(self, address: str) -> ApiResponse[LendingPool]:
        """Get a lending pool by its contract address."""
        return await self.fetch("lending_pool_by_address", {"address": address})

    async def get_pool_snapshot(self, pool_id: str) -> ApiResponse[LendingPoolSnapshot]:
        """Get the latest snapshot (metrics) for a lending pool."""
        return await self.fetch("pool_snapshot", {"pool_id": pool_id})

    async def get_lending_transactions(
        self, pool_id: str
    ) -> ApiResponse[list[LendingTransaction]]:
        """Get supply/withdraw transactions for a pool."""
        return await self.fetch("lending_transactions", {"pool_id": pool_id})

    async def get_lending_transactions_by_wallet(
        self, wallet_id: str
    ) -> ApiResponse[list[LendingTransaction]]:
        return await self.fetch("lending_transactions_by_wallet", {"wallet_id": wallet_id})

    async def get_pool_interest_rates(self, pool_id: str) -> ApiResponse[InterestRates]:
        return await self.fetch("pool_interest_rates", {"pool_id": pool_id})

    async def get_pool_collateral_info(self, pool_id: str) -> ApiResponse[CollateralInfo]:
        """Get collateral configuration and risk parameters for a pool."""
        return await self.fetch("pool_collateral_info", {"pool_id": pool_id})

    async def get_pool_statistics(self, pool_id: str) -> ApiResponse[PoolStatistics]:
        return await self.fetch("pool_statistics", {"pool_id": pool_id})

    async def get_user_positions(
        self, pool_id: str, wallet_id: str
    ) -> ApiResponse[UserPositions]:
        """Get a wallet's borrow position and repayment history in one pool."""
        return await self.fetch("user_positions", {"pool_id": pool_id, "wallet_id": wallet_id})

    # ------------------------------------------------------------------
    # Loans
    # ------------------------------------------------------------------

    async def get_loan(self, id: str) -> ApiResponse[Loan]:
        return await self.fetch("loan", {"id": id})

    async def get_loans(self, pool_id: str) -> ApiResponse[list[Loan]]:
        """Get loans for a pool via the pool-scoped route."""
        return await self.fetch("pool_loans", {"pool_id": pool_id})

    async def get_all_loans(self) -> ApiResponse[list[Loan]]:
        return await self.fetch("loans")

    async def get_loans_by_pool(self, pool_id: str) -> ApiResponse[list[Loan]]:
        return await self.fetch("loans_by_pool", {"pool_id": pool_id})

    async def get_loans_by_wallet(self, wallet_id: str) -> ApiResponse[list[Loan]]:
        return await self.fetch("loans_by_wallet", {"wallet_id": wallet_id})

    async def get_loans_by_status(self, status: LoanStatus | str) -> ApiResponse[list[Loan]]:
        """Get loans by status (active, repaid or liquidated)."""
        return await self.fetch("loans_by_status", {"status": status})

    async def get_all_repayments(self) -> ApiResponse[list[LoanRepayment]]:
        return await self.fetch("repayments")

    async def get_repayments_by_loan(self, loan_id: str) -> ApiResponse[list[LoanRepayment]]:
        return await self.fetch("repayments_by_loan", {"loan_id": loan_id})

    async def get_all_liquidations(self) -> ApiResponse[list[LoanLiquidation]]:
        return await self.fetch("liquidations")

    async def get_liquidations_by_loan(
        self, loan_id: str
    ) -> ApiResponse[list[LoanLiquidation]]:
        return await self.fetch("liquidations_by_loan", {"loan_id": loan_id})

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def process_mutation(
        self, action: MutationAction | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        """Submit a tagged mutation action.

        ``action`` is an action variant or its wire form, e.g.
        ``{"OrderBook": {"CancelOrder": "order-1"}}``. The response variant is
        chosen by the back-end; use the ``is_*`` predicates from
        ``cradle.api.mutations`` to narrow it.

        Raises:
            ValueError: If a wire-form action names no known operation
            pydantic.ValidationError: If its payload does not fit the operation
        """
        if isinstance(action, Mapping):
            action = parse_mutation_action(dict(action))
        logger.debug(
            "Submitting mutation",
            extra={"subsystem": action.subsystem.value, "operation": action.operation},
        )
        return await self.fetch("process", {"action": action})

    async def create_account(
        self, params: CreateAccountInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(CreateAccountAction(payload=params))

    async def update_account_status(
        self, params: UpdateAccountStatusInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(UpdateAccountStatusAction(payload=params))

    async def create_wallet(
        self, params: CreateWalletInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(CreateWalletAction(payload=params))

    async def create_asset(
        self, params: CreateAssetInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(CreateAssetAction(payload=params))

    async def create_existing_asset(self, asset_id: str) -> ApiResponse[MutationResponse]:
        """Register an asset that already exists on-chain."""
        return await self.process_mutation(CreateExistingAssetAction(payload=asset_id))

    async def create_market(
        self, params: CreateMarketInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(CreateMarketAction(payload=params))

    async def update_market_status(
        self, params: UpdateMarketStatusInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(UpdateMarketStatusAction(payload=params))

    async def place_order(
        self, params: PlaceOrderInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(PlaceOrderAction(payload=params))

    async def cancel_order(self, order_id: str) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(CancelOrderAction(payload=order_id))

    async def add_time_series_record(
        self, params: AddTimeSeriesRecordInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(AddRecordAction(payload=params))

    async def create_lending_pool(
        self, params: CreateLendingPoolInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(CreateLendingPoolAction(payload=params))

    async def supply_liquidity(
        self, params: SupplyLiquidityInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(SupplyLiquidityAction(payload=params))

    async def withdraw_liquidity(
        self, params: WithdrawLiquidityInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(WithdrawLiquidityAction(payload=params))

    async def borrow_asset(
        self, params: BorrowAssetInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(BorrowAssetAction(payload=params))

    async def repay_borrow(
        self, params: RepayBorrowInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        return await self.process_mutation(RepayBorrowAction(payload=params))

    async def create_loan_repayment(
        self, params: CreateLoanRepaymentInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        """Record a repayment against a loan."""
        return await self.process_mutation(CreateRepaymentAction(payload=params))

    async def create_loan_liquidation(
        self, params: CreateLoanLiquidationInput | Mapping[str, Any]
    ) -> ApiResponse[MutationResponse]:
        """Record a liquidation of a loan."""
        return await self.process_mutation(CreateLiquidationAction(payload=params))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> CradleClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
