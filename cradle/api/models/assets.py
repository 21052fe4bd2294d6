"""Asset record."""

from pydantic import BaseModel, ConfigDict

from ..core.enums import AssetType


class Asset(BaseModel):
    """Token registered with the platform.

    ``token`` is the on-chain token identifier and ``asset_manager`` the
    contract that administers it.
    """

    id: str
    asset_manager: str
    token: str
    created_at: str
    asset_type: AssetType
    name: str
    symbol: str
    decimals: int
    icon: str

    model_config = ConfigDict(frozen=True, extra="allow")


class AirdropRequest(BaseModel):
    """Faucet request body: credit ``asset`` to ``account``."""

    account: str
    asset: str

    model_config = ConfigDict(frozen=True)
