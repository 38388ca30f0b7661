"""
Redirect-based sign-in with the wallet.

Flow:
1. App calls build_sign_in_url() and navigates the page there
2. User approves the app in the wallet
3. Wallet redirects back with ``auth_token`` and ``account_id`` in the query
4. complete_sign_in_from_return_url() stores the credentials
5. sign_out() forgets them

The "awaiting return" step is never persisted; it only exists across the
external redirect.
"""

import logging
from typing import Optional

import httpx

from walletlink.urls import origin_of, query_param

from .models import AuthData, Session
from .session_store import SessionStore


logger = logging.getLogger(__name__)

LOGIN_PATH_SUFFIX = "/login/"


class AuthFlow:
    def __init__(self, session: Session, store: SessionStore, wallet_base_url: str):
        self.session = session
        self.store = store
        self.wallet_base_url = wallet_base_url.rstrip("/")

    def build_sign_in_url(
        self,
        contract_id: str,
        title: str,
        current_url: str,
        success_url: Optional[str] = None,
        failure_url: Optional[str] = None,
    ) -> str:
        """
        Build the wallet login URL for this app.

        Args:
            contract_id: Contract the app wants to act on
            title: Application name shown by the wallet
            current_url: URL of the page starting the sign-in
            success_url: Where the wallet returns on approval (default: current_url)
            failure_url: Where the wallet returns on denial (default: current_url)

        Returns:
            The absolute URL to navigate to
        """
        url = httpx.URL(
            self.wallet_base_url + LOGIN_PATH_SUFFIX,
            params={
                "title": title,
                "contract_id": contract_id,
                "success_url": success_url or current_url,
                "failure_url": failure_url or current_url,
                "app_url": origin_of(current_url),
            },
        )
        return str(url)

    def complete_sign_in_from_return_url(self, url: str) -> Optional[AuthData]:
        """
        Commit the credentials carried by the wallet's return redirect.

        Returns None and leaves the session untouched when either
        ``auth_token`` or ``account_id`` is missing or empty. Callers only
        invoke this while signed out.
        """
        auth_token = query_param(url, "auth_token") or ""
        account_id = query_param(url, "account_id") or ""
        if not auth_token or not account_id:
            return None

        auth = AuthData(account_id=account_id, auth_token=auth_token)
        self.session.auth = auth
        self.store.save(auth)
        logger.info(f"Signed in as {account_id}")
        return auth

    def sign_out(self) -> None:
        if self.session.is_signed_in:
            logger.info(f"Signing out {self.session.account_id}")
        self.session.auth = None
        self.store.clear()
