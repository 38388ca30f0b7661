"""
Matching wallet responses to the requests waiting for them.

Every outbound signing request gets a random request id and a pending entry
holding its resolve/reject callbacks. A response pops the entry, so each
request completes at most once. All access happens on one event loop:
registration runs before the caller first awaits, completion runs inside
the channel's message callback.
"""

import logging
import secrets
import string
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping

from pydantic import ValidationError

from .models import SignatureSucceeded, WalletResponse


logger = logging.getLogger(__name__)

REQUEST_ID_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
REQUEST_ID_LENGTH = 32

ResolveFn = Callable[[Any], None]
RejectFn = Callable[[Any], None]


@dataclass
class PendingSignatureRequest:
    request_id: str
    resolve: ResolveFn
    reject: RejectFn


class RequestCorrelator:
    """Owns the table of outstanding requests.

    The table itself is private; callers can only insert, complete or
    discard entries through the methods below.
    """

    def __init__(self):
        self._pending: Dict[str, PendingSignatureRequest] = {}

    @staticmethod
    def next_request_id() -> str:
        # Collisions with pending ids are not checked; 62**32 makes them negligible
        return "".join(secrets.choice(REQUEST_ID_ALPHABET) for _ in range(REQUEST_ID_LENGTH))

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def is_pending(self, request_id: str) -> bool:
        return request_id in self._pending

    def register(self, request_id: str, resolve: ResolveFn, reject: RejectFn) -> None:
        """Store a pending request. An entry with the same id is overwritten."""
        if request_id in self._pending:
            logger.warning(f"Request ID {request_id} already pending, overwriting")
        self._pending[request_id] = PendingSignatureRequest(
            request_id=request_id,
            resolve=resolve,
            reject=reject,
        )

    def resolve_incoming(self, decoded: Any) -> bool:
        """
        Complete the pending request a decoded wallet message answers.

        Returns True when a request was completed. Malformed messages and
        unknown request ids are logged and dropped. A malformed message that
        names a pending request (e.g. a non-boolean ``success``) leaves that
        request pending until it is discarded or rejected by the caller.
        """
        if not isinstance(decoded, Mapping):
            logger.error(f"Dropping non-object wallet message: {decoded!r}")
            return False

        try:
            response = WalletResponse.model_validate(dict(decoded))
        except ValidationError as e:
            logger.error(f"Dropping malformed wallet message: {e}")
            return False

        pending = self._pending.pop(response.request_id, None)
        if pending is None:
            logger.error(f"Request ID {response.request_id!r} was not found")
            return False

        outcome = response.outcome()
        if isinstance(outcome, SignatureSucceeded):
            pending.resolve(outcome.result)
        else:
            pending.reject(outcome.error)
        return True

    def discard(self, request_id: str) -> bool:
        """Forget a pending request without completing it."""
        return self._pending.pop(request_id, None) is not None

    def reject_all(self, error: Any) -> int:
        """Reject every pending request with ``error``; returns how many."""
        pending = list(self._pending.values())
        self._pending.clear()
        for request in pending:
            request.reject(error)
        return len(pending)
