"""
Remote signing through the wallet frame.

The signer never sees a private key. It checks that the caller is the
signed-in account, sends a ``sign_transaction`` request carrying the session
token, and waits for the correlated response.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from walletlink.auth.models import Session
from walletlink.errors import (
    RemoteSigningError,
    SigningTimeoutError,
    TransactionDecodeError,
    UnauthorizedError,
)

from .messaging.channel import MessageChannel
from .messaging.correlator import RequestCorrelator
from .messaging.models import SignTransactionAction


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FunctionCall:
    method_name: bytes
    args: bytes


@dataclass(frozen=True)
class TransactionBody:
    function_call: FunctionCall


@dataclass(frozen=True)
class Transaction:
    """Transaction to sign: its hash and the function call it carries."""
    hash: Any
    body: TransactionBody

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Transaction":
        """Build from ``{"hash": ..., "body": {"FunctionCall": {...}}}``."""
        try:
            call = data["body"]["FunctionCall"]
            function_call = FunctionCall(
                method_name=_as_bytes(call["method_name"]),
                args=_as_bytes(call["args"]),
            )
            return cls(hash=data["hash"], body=TransactionBody(function_call=function_call))
        except TransactionDecodeError:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise TransactionDecodeError(f"Malformed transaction: {e}") from e


def _as_bytes(value: Union[bytes, bytearray, str, list]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, list) and all(
        isinstance(b, int) and not isinstance(b, bool) for b in value
    ):
        return bytes(value)
    raise TransactionDecodeError(f"Expected bytes, str or a list of ints, got {type(value).__name__}")


def decode_function_call(tx: Transaction) -> Tuple[str, Any]:
    """
    Extract the method name and JSON arguments from a transaction.

    Raises:
        TransactionDecodeError: If either field is not valid UTF-8 / JSON
    """
    call = tx.body.function_call
    if not isinstance(call.method_name, (bytes, bytearray)) or not isinstance(call.args, (bytes, bytearray)):
        raise TransactionDecodeError("Function call method_name and args must be bytes")
    try:
        method_name = bytes(call.method_name).decode("utf-8")
        args = json.loads(bytes(call.args).decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError, TypeError) as e:
        raise TransactionDecodeError(f"Malformed function call payload: {e}") from e
    return method_name, args if args is not None else {}


class RemoteSigner:
    def __init__(
        self,
        session: Session,
        channel: MessageChannel,
        correlator: RequestCorrelator,
        timeout: Optional[float] = None,
    ):
        self.session = session
        self.channel = channel
        self.correlator = correlator
        self.timeout = timeout

    def _authorize(self, sender_account_id: str) -> None:
        if not self.session.is_signed_in or sender_account_id != self.session.account_id:
            raise UnauthorizedError(sender_account_id)

    async def sign_transaction(
        self,
        tx: Union[Transaction, Mapping[str, Any]],
        sender_account_id: str,
    ) -> Any:
        """
        Have the wallet sign ``tx`` on behalf of ``sender_account_id``.

        Args:
            tx: Transaction, or its dict form with ``hash`` and ``body.FunctionCall``
            sender_account_id: Must be the signed-in account

        Returns:
            The signature reported by the wallet

        Raises:
            UnauthorizedError: Signed out, or sender is another account
            TransactionDecodeError: Function call payload is malformed
            RemoteSigningError: The wallet reported a failure
            SigningTimeoutError: No response within ``timeout`` seconds
        """
        self._authorize(sender_account_id)

        if not isinstance(tx, Transaction):
            tx = Transaction.from_dict(tx)
        method_name, args = decode_function_call(tx)

        return await self.remote_sign(tx.hash, method_name, args)

    async def remote_sign(self, hash: Any, method_name: str, args: Any) -> Any:
        """One correlated request/response round trip with the wallet."""
        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()
        request_id = self.correlator.next_request_id()

        def resolve(result: Any) -> None:
            if not future.done():
                future.set_result(result)

        def reject(error: Any) -> None:
            if future.done():
                return
            if isinstance(error, BaseException):
                future.set_exception(error)
            else:
                future.set_exception(RemoteSigningError(error, request_id=request_id))

        # Register and send before the first await so no response can be missed
        self.correlator.register(request_id, resolve, reject)
        try:
            self.channel.send(
                SignTransactionAction(
                    token=self.session.auth_token,
                    method_name=method_name,
                    args=args if args is not None else {},
                    hash=hash,
                    request_id=request_id,
                )
            )
        except BaseException:
            self.correlator.discard(request_id)
            raise

        logger.debug(f"Sent sign_transaction {request_id} for {method_name}")

        try:
            if self.timeout is None:
                return await future
            return await asyncio.wait_for(future, timeout=self.timeout)
        except asyncio.TimeoutError:
            raise SigningTimeoutError(request_id, self.timeout)
        finally:
            # Timeout or caller cancellation leaves the entry behind
            if self.correlator.discard(request_id):
                logger.info(f"Released unanswered signing request {request_id}")
