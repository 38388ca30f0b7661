"""
Wallet client exceptions.
"""

from typing import Any


class WalletError(Exception):
    """Base wallet client error."""
    pass


class UnauthorizedError(WalletError):
    """Signing requested while signed out or for a different account."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Unauthorized account_id {account_id}")


class TransactionDecodeError(WalletError, ValueError):
    """Transaction function-call payload could not be decoded."""
    pass


class RemoteSigningError(WalletError):
    """The wallet reported a failed signing request.

    ``error`` carries the wallet-supplied payload verbatim.
    """

    def __init__(self, error: Any, request_id: str = ""):
        self.error = error
        self.request_id = request_id
        super().__init__(f"Wallet rejected signing request: {error!r}")


class SigningTimeoutError(WalletError):
    """No wallet response arrived within the configured timeout."""

    def __init__(self, request_id: str, timeout: float):
        self.request_id = request_id
        self.timeout = timeout
        super().__init__(f"No response for request {request_id} after {timeout}s")


class ChannelClosedError(WalletError):
    """The wallet channel was closed."""
    pass
