"""Loan, repayment and liquidation endpoints."""

from __future__ import annotations

from cradle.api.models import Loan, LoanLiquidation, LoanRepayment
from cradle.api.runtime.rest import RestEndpointSpec

from ._params import wire_value

LOAN = RestEndpointSpec(
    id="loan",
    method="GET",
    build_path=lambda p: f"/loan/{p['id']}",
    result_type=Loan,
)

POOL_LOANS = RestEndpointSpec(
    id="pool_loans",
    method="GET",
    build_path=lambda p: f"/lending-pools/{p['pool_id']}/loans",
    result_type=list[Loan],
)

LOANS = RestEndpointSpec(
    id="loans",
    method="GET",
    build_path=lambda p: "/loans",
    result_type=list[Loan],
)

LOANS_BY_POOL = RestEndpointSpec(
    id="loans_by_pool",
    method="GET",
    build_path=lambda p: f"/loans/pool/{p['pool_id']}",
    result_type=list[Loan],
)

LOANS_BY_WALLET = RestEndpointSpec(
    id="loans_by_wallet",
    method="GET",
    build_path=lambda p: f"/loans/wallet/{p['wallet_id']}",
    result_type=list[Loan],
)

LOANS_BY_STATUS = RestEndpointSpec(
    id="loans_by_status",
    method="GET",
    build_path=lambda p: f"/loans/status/{wire_value(p['status'])}",
    result_type=list[Loan],
)

REPAYMENTS = RestEndpointSpec(
    id="repayments",
    method="GET",
    build_path=lambda p: "/loan-repayments",
    result_type=list[LoanRepayment],
)

REPAYMENTS_BY_LOAN = RestEndpointSpec(
    id="repayments_by_loan",
    method="GET",
    build_path=lambda p: f"/loan-repayments/loan/{p['loan_id']}",
    result_type=list[LoanRepayment],
)

LIQUIDATIONS = RestEndpointSpec(
    id="liquidations",
    method="GET",
    build_path=lambda p: "/loan-liquidations",
    result_type=list[LoanLiquidation],
)

LIQUIDATIONS_BY_LOAN = RestEndpointSpec(
    id="liquidations_by_loan",
    method="GET",
    build_path=lambda p: f"/loan-liquidations/loan/{p['loan_id']}",
    result_type=list[LoanLiquidation],
)

SPECS = (
    LOAN,
    POOL_LOANS,
    LOANS,
    LOANS_BY_POOL,
    LOANS_BY_WALLET,
    LOANS_BY_STATUS,
    REPAYMENTS,
    REPAYMENTS_BY_LOAN,
    LIQUIDATIONS,
    LIQUIDATIONS_BY_LOAN,
)
