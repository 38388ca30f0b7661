from .models import (
    WalletAction,
    SignTransactionAction,
    WalletResponse,
    SignatureSucceeded,
    SignatureFailed,
    SignatureOutcome,
)
from .correlator import (
    RequestCorrelator,
    PendingSignatureRequest,
    REQUEST_ID_ALPHABET,
    REQUEST_ID_LENGTH,
)
from .channel import (
    MessageChannel,
    FrameTransport,
    FrameFactory,
    EMBED_PATH_SUFFIX,
)

__all__ = [
    "WalletAction",
    "SignTransactionAction",
    "WalletResponse",
    "SignatureSucceeded",
    "SignatureFailed",
    "SignatureOutcome",
    "RequestCorrelator",
    "PendingSignatureRequest",
    "REQUEST_ID_ALPHABET",
    "REQUEST_ID_LENGTH",
    "MessageChannel",
    "FrameTransport",
    "FrameFactory",
    "EMBED_PATH_SUFFIX",
]
