"""
WalletClient: account and signer backed by an external wallet.

Owns the session, the wallet frame channel and the request table, and
exposes the operations an application uses:

    client = WalletClient("demo", page=page, store=store, frame_factory=make_frame)
    if not client.is_signed_in():
        client.request_sign_in("contract.near", "Demo App")
    signature = await client.sign_transaction(tx, client.get_account_id())
"""

import logging
from typing import Any, Mapping, Optional, Protocol, Union

from .auth.flow import AuthFlow
from .auth.models import Session
from .auth.session_store import SessionStore
from .auth.storage import JsonFileKeyValueStore, KeyValueStore, MemoryKeyValueStore
from .config import WalletSettings, settings as default_settings
from .core.messaging.channel import FrameFactory, MessageChannel
from .core.messaging.correlator import RequestCorrelator
from .core.signer import RemoteSigner, Transaction
from .errors import ChannelClosedError


logger = logging.getLogger(__name__)


class HostPage(Protocol):
    """The embedding page: where we are, and how to navigate away."""

    @property
    def current_url(self) -> str: ...

    def replace(self, url: str) -> None: ...


class WalletClient:
    def __init__(
        self,
        app_key_prefix: str,
        page: HostPage,
        store: KeyValueStore,
        frame_factory: FrameFactory,
        wallet_base_url: Optional[str] = None,
        sign_timeout: Optional[float] = None,
        settings: Optional[WalletSettings] = None,
    ):
        """
        Initialize the client and restore any persisted session.

        Args:
            app_key_prefix: Distinguishes apps sharing one storage scope
            page: Host page used for the current URL and sign-in redirect
            store: Durable key-value store for the session record
            frame_factory: Creates the hidden wallet frame
            wallet_base_url: Wallet base URL (default: from settings)
            sign_timeout: Seconds to wait for a signature (default: from settings)
            settings: Settings to read defaults from (default: module settings)
        """
        cfg = settings or default_settings
        self.page = page
        self.wallet_base_url = (wallet_base_url or cfg.wallet_base_url).rstrip("/")

        self.session = Session()
        self.session_store = SessionStore(store, app_key_prefix)
        self.auth_flow = AuthFlow(self.session, self.session_store, self.wallet_base_url)

        self.correlator = RequestCorrelator()
        self.channel = MessageChannel(
            self.wallet_base_url,
            frame_factory,
            handler=self.correlator.resolve_incoming,
        )
        self.signer = RemoteSigner(
            self.session,
            self.channel,
            self.correlator,
            timeout=sign_timeout if sign_timeout is not None else cfg.sign_timeout_seconds,
        )

        self.session.auth = self.session_store.load()
        if not self.is_signed_in():
            self.auth_flow.complete_sign_in_from_return_url(page.current_url)

    @classmethod
    def from_settings(
        cls,
        page: HostPage,
        frame_factory: FrameFactory,
        settings: Optional[WalletSettings] = None,
    ) -> "WalletClient":
        """Build a client whose store and wallet come entirely from settings."""
        cfg = settings or default_settings
        if cfg.storage_path is not None:
            store: KeyValueStore = JsonFileKeyValueStore(cfg.storage_path)
        else:
            store = MemoryKeyValueStore()
        return cls(
            cfg.app_key_prefix,
            page=page,
            store=store,
            frame_factory=frame_factory,
            settings=cfg,
        )

    def is_signed_in(self) -> bool:
        return self.session.is_signed_in

    def get_account_id(self) -> str:
        return self.session.account_id

    def request_sign_in(
        self,
        contract_id: str,
        title: str,
        success_url: Optional[str] = None,
        failure_url: Optional[str] = None,
    ) -> str:
        """Redirect the page to the wallet login; returns the URL used."""
        url = self.auth_flow.build_sign_in_url(
            contract_id,
            title,
            self.page.current_url,
            success_url=success_url,
            failure_url=failure_url,
        )
        self.page.replace(url)
        return url

    def sign_out(self) -> None:
        self.auth_flow.sign_out()

    async def sign_transaction(
        self,
        tx: Union[Transaction, Mapping[str, Any]],
        sender_account_id: str,
    ) -> Any:
        return await self.signer.sign_transaction(tx, sender_account_id)

    def close(self) -> None:
        """Fail every outstanding signature and close the wallet frame."""
        rejected = self.correlator.reject_all(ChannelClosedError("Wallet client closed"))
        if rejected:
            logger.warning(f"Closed wallet client with {rejected} pending signing requests")
        self.channel.close()

    async def __aenter__(self) -> "WalletClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()
