"""
Messages exchanged with the wallet's embedded frame.

Outbound messages are tagged by ``action``; inbound responses are decoded
into either SignatureSucceeded or SignatureFailed so that anything else is
rejected at the channel boundary instead of deep inside a caller.
"""

import base64
from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class WalletAction(str, Enum):
    """Actions the wallet frame understands."""
    SIGN_TRANSACTION = "sign_transaction"


class SignTransactionAction(BaseModel):
    """Request for the wallet to sign a function-call transaction."""
    model_config = ConfigDict(frozen=True)

    action: Literal["sign_transaction"] = WalletAction.SIGN_TRANSACTION.value
    token: str
    method_name: str
    args: Any = Field(default_factory=dict)
    hash: Any = None
    request_id: str

    @field_serializer("hash")
    def serialize_hash(self, value: Any) -> Any:
        if isinstance(value, (bytes, bytearray)):
            return base64.b64encode(bytes(value)).decode("ascii")
        return value


@dataclass(frozen=True)
class SignatureSucceeded:
    result: Any


@dataclass(frozen=True)
class SignatureFailed:
    error: Any


SignatureOutcome = Union[SignatureSucceeded, SignatureFailed]


class WalletResponse(BaseModel):
    """Response to an earlier request, matched by ``request_id``."""
    model_config = ConfigDict(extra="ignore")

    request_id: str = ""
    success: bool = False
    result: Any = None
    error: Any = None

    def outcome(self) -> SignatureOutcome:
        if self.success:
            return SignatureSucceeded(result=self.result)
        return SignatureFailed(error=self.error)
