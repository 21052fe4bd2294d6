"""Lending pool endpoints.

Covers pool lookups, the latest pool snapshot, lending transactions and
the contract-derived read models (interest rates, collateral info, pool
statistics, per-wallet positions).
"""

from __future__ import annotations

from urllib.parse import quote

from cradle.api.models import (
    CollateralInfo,
    InterestRates,
    LendingPool,
    LendingPoolSnapshot,
    LendingTransaction,
    PoolStatistics,
    UserPositions,
)
from cradle.api.runtime.rest import RestEndpointSpec

LENDING_POOL = RestEndpointSpec(
    id="lending_pool",
    method="GET",
    build_path=lambda p: f"/pools/{p['id']}",
    result_type=LendingPool,
)

LENDING_POOLS = RestEndpointSpec(
    id="lending_pools",
    method="GET",
    build_path=lambda p: "/pools",
    result_type=list[LendingPool],
)

# Pool names are free text, so the name segment is percent-encoded.
LENDING_POOL_BY_NAME = RestEndpointSpec(
    id="lending_pool_by_name",
    method="GET",
    build_path=lambda p: f"/pools/name/{quote(p['name'], safe='')}",
    result_type=LendingPool,
)

LENDING_POOL_BY_ADDRESS = RestEndpointSpec(
    id="lending_pool_by_address",
    method="GET",
    build_path=lambda p: f"/pools/address/{p['address']}",
    result_type=LendingPool,
)

POOL_SNAPSHOT = RestEndpointSpec(
    id="pool_snapshot",
    method="GET",
    build_path=lambda p: f"/pools/{p['pool_id']}/snapshot",
    result_type=LendingPoolSnapshot,
)

LENDING_TRANSACTIONS = RestEndpointSpec(
    id="lending_transactions",
    method="GET",
    build_path=lambda p: f"/pools/{p['pool_id']}/transactions",
    result_type=list[LendingTransaction],
)

LENDING_TRANSACTIONS_BY_WALLET = RestEndpointSpec(
    id="lending_transactions_by_wallet",
    method="GET",
    build_path=lambda p: f"/lending-transactions/wallet/{p['wallet_id']}",
    result_type=list[LendingTransaction],
)

POOL_INTEREST_RATES = RestEndpointSpec(
    id="pool_interest_rates",
    method="GET",
    build_path=lambda p: f"/pools/{p['pool_id']}/interest-rates",
    result_type=InterestRates,
)

POOL_COLLATERAL_INFO = RestEndpointSpec(
    id="pool_collateral_info",
    method="GET",
    build_path=lambda p: f"/pools/{p['pool_id']}/collateral-info",
    result_type=CollateralInfo,
)

POOL_STATISTICS = RestEndpointSpec(
    id="pool_statistics",
    method="GET",
    build_path=lambda p: f"/pools/{p['pool_id']}/pool-stats",
    result_type=PoolStatistics,
)

USER_POSITIONS = RestEndpointSpec(
    id="user_positions",
    method="GET",
    build_path=lambda p: f"/pools/{p['pool_id']}/user-positions/{p['wallet_id']}",
    result_type=UserPositions,
)

SPECS = (
    LENDING_POOL,
    LENDING_POOLS,
    LENDING_POOL_BY_NAME,
    LENDING_POOL_BY_ADDRESS,
    POOL_SNAPSHOT,
    LENDING_TRANSACTIONS,
    LENDING_TRANSACTIONS_BY_WALLET,
    POOL_INTEREST_RATES,
    POOL_COLLATERAL_INFO,
    POOL_STATISTICS,
    USER_POSITIONS,
)
