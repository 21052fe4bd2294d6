"""Account and wallet endpoints."""

from __future__ import annotations

from cradle.api.models import CradleAccount, CradleWallet
from cradle.api.runtime.rest import RestEndpointSpec

ACCOUNT = RestEndpointSpec(
    id="account",
    method="GET",
    build_path=lambda p: f"/accounts/{p['id']}",
    result_type=CradleAccount,
)

ACCOUNT_BY_LINKED_ID = RestEndpointSpec(
    id="account_by_linked_id",
    method="GET",
    build_path=lambda p: f"/accounts/linked/{p['linked_id']}",
    result_type=CradleAccount,
)

ACCOUNT_WALLETS = RestEndpointSpec(
    id="account_wallets",
    method="GET",
    build_path=lambda p: f"/accounts/{p['account_id']}/wallets",
    result_type=list[CradleWallet],
)

WALLET = RestEndpointSpec(
    id="wallet",
    method="GET",
    build_path=lambda p: f"/wallets/{p['id']}",
    result_type=CradleWallet,
)

# Same path as ACCOUNT_WALLETS; the back-end has not confirmed the two return
# the same shape, so both entry points stay and this one expects a single wallet.
WALLET_BY_ACCOUNT_ID = RestEndpointSpec(
    id="wallet_by_account_id",
    method="GET",
    build_path=lambda p: f"/accounts/{p['account_id']}/wallets",
    result_type=CradleWallet,
)

SPECS = (ACCOUNT, ACCOUNT_BY_LINKED_ID, ACCOUNT_WALLETS, WALLET, WALLET_BY_ACCOUNT_ID)
