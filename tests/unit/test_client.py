"""Unit tests for CradleClient.

The HTTP layer is mocked at HTTPClient so requests run through the real
runner, transport normalization and typed envelope parsing.
"""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from cradle.api import CradleClient
from cradle.api.core import ConfigurationError, HealthCheckError
from cradle.api.core.enums import LoanStatus, MarketStatus, MarketType
from cradle.api.models import ApiResponse, MarketFilters
from cradle.api.mutations import (
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
    PlaceOrderAction,
    RepayBorrowAction,
    SupplyLiquidityAction,
    UpdateAccountStatusAction,
    UpdateMarketStatusAction,
    WithdrawLiquidityAction,
    is_create_account,
    is_place_order,
)
from cradle.api.runtime.rest import HTTPResult

BASE_URL = "https://api.example.com"

MARKET = {
    "id": "m-1",
    "name": "HBAR/USDC",
    "description": "Spot market",
    "icon": "",
    "asset_one": "a-1",
    "asset_two": "a-2",
    "created_at": "2024-01-01T00:00:00Z",
    "market_type": "spot",
    "market_status": "active",
    "market_regulation": "unregulated",
}


def _json_result(payload, status: int = 200, reason: str = "OK") -> HTTPResult:
    return HTTPResult(status=status, reason=reason, body=json.dumps(payload).encode())


@pytest.fixture
def client():
    c = CradleClient(api_key="secret", base_url=BASE_URL)
    c._transport._http.request = AsyncMock()
    c._transport._http.get = AsyncMock()
    return c


def _http(client):
    return client._transport._http


class TestConstruction:
    def test_requires_api_key(self):
        with pytest.raises(ConfigurationError):
            CradleClient()

    def test_defaults(self):
        c = CradleClient(api_key="k")
        assert c.config.base_url == "http://localhost:3000"
        assert c.config.timeout_ms == 30000

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CRADLE_API_KEY", "env-key")
        monkeypatch.setenv("CRADLE_API_URL", BASE_URL)
        monkeypatch.setenv("CRADLE_API_TIMEOUT_MS", "2500")

        c = CradleClient.from_env()

        assert c.config.api_key == "env-key"
        assert c.config.base_url == BASE_URL
        assert c.config.timeout_ms == 2500

    @pytest.mark.asyncio
    async def test_fetch_unknown_endpoint(self, client):
        with pytest.raises(ValueError, match="Unknown REST endpoint"):
            await client.fetch("does_not_exist")

    @pytest.mark.asyncio
    async def test_context_manager_closes(self):
        c = CradleClient(api_key="k")
        c._transport._http.close = AsyncMock()

        async with c as entered:
            assert entered is c

        c._transport._http.close.assert_called_once()


class TestReads:
    @pytest.mark.asyncio
    async def test_markets_with_filters(self, client):
        _http(client).request.return_value = _json_result(
            {"success": True, "data": [MARKET], "error": None}
        )

        response = await client.get_markets(
            MarketFilters(market_type=MarketType.SPOT, status=MarketStatus.ACTIVE)
        )

        args, kwargs = _http(client).request.call_args
        assert args == ("GET", "/markets?market_type=spot&status=active")
        assert kwargs["headers"] == {"Authorization": "Bearer secret"}
        assert kwargs["json"] is None
        assert response.success is True
        assert response.data[0].id == "m-1"
        assert response.data[0].market_type is MarketType.SPOT

    @pytest.mark.asyncio
    async def test_markets_filters_as_mapping(self, client):
        _http(client).request.return_value = _json_result(
            {"success": True, "data": [], "error": None}
        )

        await client.get_markets({"regulation": "regulated"})

        assert _http(client).request.call_args.args[1] == "/markets?regulation=regulated"

    @pytest.mark.asyncio
    async def test_markets_without_filters(self, client):
        _http(client).request.return_value = _json_result(
            {"success": True, "data": [], "error": None}
        )

        await client.get_markets()

        assert _http(client).request.call_args.args[1] == "/markets"

    @pytest.mark.asyncio
    async def test_backend_failure_envelope_passes_through(self, client):
        _http(client).request.return_value = _json_result(
            {"success": False, "data": None, "error": "Account not found"},
            status=404,
            reason="Not Found",
        )

        response = await client.get_account("missing")

        assert response.success is False
        assert response.data is None
        assert response.error == "Account not found"

    @pytest.mark.asyncio
    async def test_timeout_becomes_failure_envelope(self):
        c = CradleClient(api_key="secret", base_url=BASE_URL, timeout_ms=1000)
        c._transport._http.request = AsyncMock(side_effect=asyncio.TimeoutError())

        response = await c.get_account("acc-1")

        assert response.success is False
        assert response.data is None
        assert response.error == "Request timed out after 1000ms"

    @pytest.mark.asyncio
    async def test_unknown_enum_value_keeps_success(self, client):
        account = {
            "id": "acc-1",
            "linked_account_id": "user-1",
            "created_at": "2024-01-01T00:00:00Z",
            "account_type": "retail",
            "status": "pending",
        }
        _http(client).request.return_value = _json_result(
            {"success": True, "data": account, "error": None}
        )

        response = await client.get_account("acc-1")

        assert response.success is True
        assert response.error is None
        assert response.data == account

    @pytest.mark.asyncio
    async def test_fractional_amount_keeps_success(self, client):
        tx = {
            "id": "t-1",
            "wallet": "w-1",
            "pool": "p-1",
            "amount": 1.5,
            "transaction_type": "supply",
            "created_at": "2024-01-01T00:00:00Z",
        }
        _http(client).request.return_value = _json_result(
            {"success": True, "data": [tx], "error": None}
        )

        response = await client.get_lending_transactions("p-1")

        assert response.success is True
        assert response.data == [tx]

    @pytest.mark.asyncio
    async def test_extra_fields_are_kept(self, client):
        _http(client).request.return_value = _json_result(
            {"success": True, "data": {**MARKET, "fee_tier": "0.3"}, "error": None}
        )

        response = await client.get_market("m-1")

        assert response.success is True
        assert response.data.market_type is MarketType.SPOT
        assert response.data.model_dump()["fee_tier"] == "0.3"

    @pytest.mark.asyncio
    async def test_loans_by_status_path(self, client):
        _http(client).request.return_value = _json_result(
            {"success": True, "data": [], "error": None}
        )

        await client.get_loans_by_status(LoanStatus.REPAID)

        assert _http(client).request.call_args.args == ("GET", "/loans/status/repaid")

    @pytest.mark.asyncio
    async def test_airdrop(self, client):
        _http(client).request.return_value = _json_result(
            {"success": True, "data": {"tx": "0x1"}, "error": None}
        )

        response = await client.airdrop("0.0.1001", "a-1")

        args, kwargs = _http(client).request.call_args
        assert args == ("POST", "/faucet")
        assert kwargs["json"] == {"account": "0.0.1001", "asset": "a-1"}
        assert response.data == {"tx": "0x1"}

    @pytest.mark.asyncio
    async def test_closed_port_becomes_failure_envelope(self):
        c = CradleClient(api_key="secret", base_url="http://127.0.0.1:1", timeout_ms=2000)
        try:
            response = await c.get_assets()
        finally:
            await c.close()

        assert response.success is False
        assert response.data is None
        assert response.error


class TestMutations:
    @pytest.mark.asyncio
    async def test_create_account(self, client):
        _http(client).request.return_value = _json_result(
            {"success": True, "data": {"Accounts": {"CreateAccount": "acc-1"}}, "error": None}
        )

        response = await client.create_account(
            {"linked_account_id": "user-1", "account_type": "retail"}
        )

        args, kwargs = _http(client).request.call_args
        assert args == ("POST", "/process")
        assert kwargs["json"] == {
            "Accounts": {"CreateAccount": {"linked_account_id": "user-1", "account_type": "retail"}}
        }
        assert kwargs["headers"] == {"Authorization": "Bearer secret"}
        assert response.success is True
        assert is_create_account(response.data)
        assert response.data.result == "acc-1"

    @pytest.mark.asyncio
    async def test_place_order_response(self, client):
        _http(client).request.return_value = _json_result(
            {
                "success": True,
                "data": {
                    "OrderBook": {
                        "PlaceOrder": {
                            "id": "o-1",
                            "status": "filled",
                            "bid_amount_filled": "10",
                            "ask_amount_filled": "5",
                            "matched_trades": ["t-1"],
                        }
                    }
                },
                "error": None,
            }
        )

        response = await client.cancel_order("o-0")

        # The back-end picks the response variant, not the client
        assert is_place_order(response.data)
        assert response.data.result.matched_trades == ["t-1"]

    @pytest.mark.asyncio
    async def test_mutation_failure_envelope(self, client):
        _http(client).request.return_value = _json_result(
            {"success": False, "data": None, "error": "Insufficient liquidity"}, status=400
        )

        response = await client.withdraw_liquidity({"wallet": "w", "pool": "p", "amount": 10})

        assert response.success is False
        assert response.error == "Insufficient liquidity"

    @pytest.mark.asyncio
    async def test_unparseable_mutation_response_keeps_raw_data(self, client):
        _http(client).request.return_value = _json_result(
            {"success": True, "data": {"Accounts": "CreateAccount"}, "error": None}
        )

        response = await client.create_wallet(
            {"cradle_account_id": "acc-1", "address": "0x1", "contract_id": "0.0.9"}
        )

        assert response.success is True
        assert response.data == {"Accounts": "CreateAccount"}

    @pytest.mark.asyncio
    async def test_process_mutation_accepts_wire_form(self, client):
        _http(client).request.return_value = _json_result(
            {"success": True, "data": {"OrderBook": {"CancelOrder": None}}, "error": None}
        )

        response = await client.process_mutation({"OrderBook": {"CancelOrder": "o-1"}})

        args, kwargs = _http(client).request.call_args
        assert args == ("POST", "/process")
        assert kwargs["json"] == {"OrderBook": {"CancelOrder": "o-1"}}
        assert response.success is True

    @pytest.mark.asyncio
    async def test_process_mutation_rejects_unknown_wire_operation(self, client):
        with pytest.raises(ValueError, match="Unknown mutation action"):
            await client.process_mutation({"OrderBook": {"AmendOrder": "o-1"}})

        _http(client).request.assert_not_called()

    @pytest.mark.parametrize(
        "method,arg,action_type",
        [
            (
                "create_account",
                {"linked_account_id": "u", "account_type": "retail"},
                CreateAccountAction,
            ),
            (
                "update_account_status",
                {"account_id": "a", "status": "verified"},
                UpdateAccountStatusAction,
            ),
            (
                "create_wallet",
                {"cradle_account_id": "a", "address": "x", "contract_id": "c"},
                CreateWalletAction,
            ),
            (
                "create_asset",
                {
                    "asset_manager": "m",
                    "token": "t",
                    "asset_type": "native",
                    "name": "n",
                    "symbol": "s",
                    "decimals": 8,
                    "icon": "i",
                },
                CreateAssetAction,
            ),
            ("create_existing_asset", "0.0.42", CreateExistingAssetAction),
            (
                "create_market",
                {
                    "name": "n",
                    "description": "d",
                    "icon": "i",
                    "asset_one": "a",
                    "asset_two": "b",
                    "market_type": "spot",
                    "market_status": "active",
                    "market_regulation": "regulated",
                },
                CreateMarketAction,
            ),
            (
                "update_market_status",
                {"market_id": "m", "status": "suspended"},
                UpdateMarketStatusAction,
            ),
            (
                "place_order",
                {
                    "wallet": "w",
                    "market_id": "m",
                    "bid_asset": "a",
                    "ask_asset": "b",
                    "bid_amount": "1",
                    "ask_amount": "2",
                    "price": "2",
                    "mode": "immediate-or-cancel",
                    "order_type": "limit",
                },
                PlaceOrderAction,
            ),
            ("cancel_order", "o-1", CancelOrderAction),
            (
                "add_time_series_record",
                {
                    "market_id": "m",
                    "asset": "a",
                    "open": "1",
                    "high": "2",
                    "low": "1",
                    "close": "2",
                    "volume": "10",
                    "start_time": "2024-01-01T00:00:00Z",
                    "end_time": "2024-01-01T01:00:00Z",
                    "interval": "1hr",
                    "data_provider_type": "exchange",
                    "data_provider": "p",
                },
                AddRecordAction,
            ),
            (
                "create_lending_pool",
                {
                    "pool_address": "0x1",
                    "pool_contract_id": "0.0.5",
                    "reserve_asset": "a",
                    "loan_to_value": "0.75",
                    "base_rate": "0.02",
                    "slope1": "0.1",
                    "slope2": "1",
                    "liquidation_threshold": "0.8",
                    "liquidation_discount": "0.05",
                    "reserve_factor": "0.1",
                    "name": "n",
                    "title": "t",
                    "description": "d",
                },
                CreateLendingPoolAction,
            ),
            ("supply_liquidity", {"wallet": "w", "pool": "p", "amount": 10}, SupplyLiquidityAction),
            (
                "withdraw_liquidity",
                {"wallet": "w", "pool": "p", "amount": 10},
                WithdrawLiquidityAction,
            ),
            (
                "borrow_asset",
                {"wallet": "w", "pool": "p", "amount": 10, "collateral": "a"},
                BorrowAssetAction,
            ),
            ("repay_borrow", {"wallet": "w", "loan": "l", "amount": 10}, RepayBorrowAction),
            (
                "create_loan_repayment",
                {"loan_id": "l", "repayment_amount": "5"},
                CreateRepaymentAction,
            ),
            (
                "create_loan_liquidation",
                {"loan_id": "l", "liquidator_wallet_id": "w", "liquidation_amount": "5"},
                CreateLiquidationAction,
            ),
        ],
    )
    @pytest.mark.asyncio
    async def test_wrappers_build_matching_action(self, client, method, arg, action_type):
        client.process_mutation = AsyncMock(return_value=ApiResponse.failure("stub"))

        await getattr(client, method)(arg)

        (action,), _ = client.process_mutation.call_args
        assert type(action) is action_type
        outer, inner = action_type.tag()
        assert list(action.to_wire()) == [outer]
        assert list(action.to_wire()[outer]) == [inner]


class TestHealth:
    @pytest.mark.asyncio
    async def test_healthy(self, client):
        _http(client).get.return_value = {"status": "ok", "timestamp": "2024-01-01T00:00:00Z"}

        health = await client.health()

        assert health.status == "ok"
        _http(client).get.assert_called_once_with("/health")
        _http(client).request.assert_not_called()

    @pytest.mark.asyncio
    async def test_unhealthy_status(self, client):
        _http(client).get.side_effect = aiohttp.ClientResponseError(
            request_info=MagicMock(), history=(), status=503, message="Service Unavailable"
        )

        with pytest.raises(HealthCheckError) as exc_info:
            await client.health()

        assert exc_info.value.status_code == 503
        assert "503" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_unreachable(self, client):
        _http(client).get.side_effect = aiohttp.ClientConnectionError("Connection refused")

        with pytest.raises(HealthCheckError, match="Connection refused") as exc_info:
            await client.health()

        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, aiohttp.ClientConnectionError)

    @pytest.mark.asyncio
    async def test_timeout(self, client):
        _http(client).get.side_effect = asyncio.TimeoutError()

        with pytest.raises(HealthCheckError, match="timed out"):
            await client.health()

    @pytest.mark.asyncio
    async def test_unexpected_body(self, client):
        _http(client).get.return_value = {"up": True}

        with pytest.raises(HealthCheckError):
            await client.health()
