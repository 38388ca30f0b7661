"""
Browser-style wallet client: session handling plus remote signing through
the wallet's embedded frame.
"""

from .auth import AuthData, JsonFileKeyValueStore, MemoryKeyValueStore
from .client import HostPage, WalletClient
from .config import WalletSettings
from .core import FunctionCall, Transaction, TransactionBody
from .errors import (
    ChannelClosedError,
    RemoteSigningError,
    SigningTimeoutError,
    TransactionDecodeError,
    UnauthorizedError,
    WalletError,
)

__all__ = [
    "AuthData",
    "JsonFileKeyValueStore",
    "MemoryKeyValueStore",
    "HostPage",
    "WalletClient",
    "WalletSettings",
    "FunctionCall",
    "Transaction",
    "TransactionBody",
    "ChannelClosedError",
    "RemoteSigningError",
    "SigningTimeoutError",
    "TransactionDecodeError",
    "UnauthorizedError",
    "WalletError",
]
