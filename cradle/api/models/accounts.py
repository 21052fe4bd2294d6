"""Account and wallet records."""

from pydantic import BaseModel, ConfigDict

from ..core.enums import AccountStatus, AccountType, WalletStatus


class CradleAccount(BaseModel):
    id: str
    linked_account_id: str
    created_at: str
    account_type: AccountType
    status: AccountStatus

    model_config = ConfigDict(frozen=True, extra="allow")


class CradleWallet(BaseModel):
    id: str
    cradle_account_id: str
    address: str
    contract_id: str
    created_at: str
    status: WalletStatus

    model_config = ConfigDict(frozen=True, extra="allow")
