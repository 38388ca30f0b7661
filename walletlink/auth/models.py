"""
Session models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthData(BaseModel):
    """Credentials of the single signed-in account.

    Persisted with the camelCase keys the wallet redirect flow has always
    used (``accountId``/``authToken``).
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    account_id: str = Field(alias="accountId")
    auth_token: str = Field(alias="authToken")


class Session:
    """The active session, owned by the client and shared by reference.

    ``auth`` is None while signed out. Only AuthFlow replaces it.
    """

    def __init__(self, auth: Optional[AuthData] = None):
        self.auth = auth

    @property
    def is_signed_in(self) -> bool:
        return self.auth is not None and bool(self.auth.account_id)

    @property
    def account_id(self) -> str:
        return self.auth.account_id if self.auth else ""

    @property
    def auth_token(self) -> str:
        return self.auth.auth_token if self.auth else ""

    def __repr__(self) -> str:
        return f"Session(account_id={self.account_id!r})"
