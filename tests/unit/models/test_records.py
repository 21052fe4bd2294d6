"""Unit tests for entity records and filters."""

from cradle.api.core.enums import (
    FillMode,
    LoanStatus,
    MarketType,
    PoolTransactionType,
    TimeSeriesInterval,
)
from cradle.api.models import (
    LendingPool,
    LendingTransaction,
    Loan,
    Market,
    MarketFilters,
    Order,
    PoolStatistics,
    TimeSeriesRecord,
    UserPositions,
)


class TestTradingRecords:
    def test_order(self):
        order = Order.model_validate(
            {
                "id": "o-1",
                "wallet": "w-1",
                "market_id": "m-1",
                "bid_asset": "a-1",
                "ask_asset": "a-2",
                "bid_amount": "100",
                "ask_amount": "50",
                "price": "0.5",
                "mode": "fill-or-kill",
                "order_type": "market",
                "status": "open",
                "created_at": "2024-01-01T00:00:00Z",
            }
        )

        assert order.mode is FillMode.FILL_OR_KILL
        assert order.price == "0.5"

    def test_time_series_interval(self):
        record = TimeSeriesRecord.model_validate(
            {
                "id": "r-1",
                "market_id": "m-1",
                "asset": "a-1",
                "open": "1",
                "high": "2",
                "low": "0.5",
                "close": "1.5",
                "volume": "100",
                "start_time": "2024-01-01T00:00:00Z",
                "end_time": "2024-01-01T00:15:00Z",
                "interval": "15min",
                "data_provider_type": "order_book",
                "data_provider": "p-1",
            }
        )

        assert record.interval is TimeSeriesInterval.M15

    def test_record_keeps_undeclared_fields(self):
        market = Market.model_validate(
            {
                "id": "m-1",
                "name": "HBAR/USDC",
                "description": "",
                "icon": "",
                "asset_one": "a-1",
                "asset_two": "a-2",
                "created_at": "2024-01-01T00:00:00Z",
                "market_type": "spot",
                "market_status": "active",
                "market_regulation": "regulated",
                "maker_fee": "0.001",
            }
        )

        assert market.model_extra == {"maker_fee": "0.001"}

    def test_filters_accept_wire_strings(self):
        assert MarketFilters(market_type="spot").market_type is MarketType.SPOT


class TestLendingRecords:
    def test_pool_optional_fields(self):
        pool = LendingPool.model_validate(
            {
                "id": "p-1",
                "pool_address": "0x1",
                "pool_contract_id": "0.0.5",
                "reserve_asset": "a-1",
                "loan_to_value": "0.75",
                "base_rate": "0.02",
                "slope1": "0.1",
                "slope2": "1.0",
                "liquidation_threshold": "0.8",
                "liquidation_discount": "0.05",
                "reserve_factor": "0.1",
                "created_at": "2024-01-01T00:00:00Z",
            }
        )

        assert pool.name is None
        assert pool.updated_at is None

    def test_transaction_amount_is_integer(self):
        tx = LendingTransaction.model_validate(
            {
                "id": "t-1",
                "wallet": "w-1",
                "pool": "p-1",
                "amount": 250000,
                "transaction_type": "supply",
                "created_at": "2024-01-01T00:00:00Z",
            }
        )

        assert tx.amount == 250000
        assert tx.transaction_type is PoolTransactionType.SUPPLY

    def test_loan_status(self):
        loan = Loan.model_validate(
            {
                "id": "l-1",
                "account_id": "acc-1",
                "wallet_id": "w-1",
                "pool": "p-1",
                "borrow_index": "1.0",
                "principal_amount": "500",
                "created_at": "2024-01-01T00:00:00Z",
                "status": "liquidated",
            }
        )

        assert loan.status is LoanStatus.LIQUIDATED
        assert loan.transaction is None

    def test_pool_statistics_before_first_snapshot(self):
        stats = PoolStatistics.model_validate(
            {
                "pool_id": "p-1",
                "pool_name": "USDC",
                "pool_address": "0x1",
                "reserve_asset": "a-1",
                "metrics": {
                    "total_supply": None,
                    "total_borrow": None,
                    "available_liquidity": None,
                    "utilization_rate": None,
                    "supply_apy": None,
                    "borrow_apy": None,
                },
                "last_updated": None,
                "note": "No snapshot data available yet",
                "rate_configuration": {"base_rate": "0.02", "slope1": "0.1", "slope2": "1.0"},
            }
        )

        assert stats.metrics.total_supply is None
        assert stats.note == "No snapshot data available yet"

    def test_user_positions(self):
        positions = UserPositions.model_validate(
            {
                "pool_id": "p-1",
                "wallet_id": "w-1",
                "borrow_position": {
                    "active_loans_count": 1,
                    "total_borrow_amount": "500",
                    "loans": [
                        {
                            "loan_id": "l-1",
                            "principal_amount": "500",
                            "status": "active",
                            "created_at": "2024-01-01T00:00:00Z",
                        }
                    ],
                },
                "repayment_history": {
                    "total_repaid": "0",
                    "repayment_count": 0,
                    "recent_repayments": [],
                },
            }
        )

        assert positions.borrow_position.loans[0].loan_id == "l-1"
        assert positions.repayment_history.recent_repayments == []
