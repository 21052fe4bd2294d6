"""Asset endpoints and the faucet."""

from __future__ import annotations

from typing import Any

from cradle.api.config import FAUCET_PATH
from cradle.api.models import Asset
from cradle.api.runtime.rest import RestEndpointSpec

ASSET = RestEndpointSpec(
    id="asset",
    method="GET",
    build_path=lambda p: f"/assets/{p['id']}",
    result_type=Asset,
)

ASSETS = RestEndpointSpec(
    id="assets",
    method="GET",
    build_path=lambda p: "/assets",
    result_type=list[Asset],
)

ASSET_BY_TOKEN = RestEndpointSpec(
    id="asset_by_token",
    method="GET",
    build_path=lambda p: f"/assets/token/{p['token']}",
    result_type=Asset,
)

ASSET_BY_MANAGER = RestEndpointSpec(
    id="asset_by_manager",
    method="GET",
    build_path=lambda p: f"/assets/manager/{p['manager']}",
    result_type=Asset,
)


def _airdrop_body(params: dict[str, Any]) -> dict[str, Any]:
    return params["request"].model_dump(mode="json")


# The faucet's payload is not documented; it is passed through untyped.
AIRDROP = RestEndpointSpec(
    id="airdrop",
    method="POST",
    build_path=lambda p: FAUCET_PATH,
    build_body=_airdrop_body,
)

SPECS = (ASSET, ASSETS, ASSET_BY_TOKEN, ASSET_BY_MANAGER, AIRDROP)
