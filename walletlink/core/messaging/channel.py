"""
Message channel to the wallet's hidden embedded frame.

The frame itself is supplied by a FrameFactory: given the embed URL and the
inbound callback, it returns a transport that can post strings to the frame.
Inbound messages are accepted only from the wallet's exact origin; that
origin check is the only trust boundary between the wallet and everyone else.
"""

import json
from typing import Any, Callable, Optional, Protocol, Union

import structlog
from pydantic import BaseModel

from walletlink.errors import ChannelClosedError
from walletlink.urls import origin_of


logger = structlog.stdlib.get_logger(__name__)

EMBED_PATH_SUFFIX = "/embed/"

InboundCallback = Callable[[str, Any], None]
MessageHandler = Callable[[Any], Any]


class FrameTransport(Protocol):
    def post_message(self, data: str, target_origin: str) -> None: ...

    def close(self) -> None: ...


class FrameFactory(Protocol):
    def __call__(self, src_url: str, on_message: InboundCallback) -> FrameTransport: ...


class MessageChannel:
    def __init__(
        self,
        wallet_base_url: str,
        frame_factory: FrameFactory,
        handler: Optional[MessageHandler] = None,
    ):
        self.wallet_base_url = wallet_base_url.rstrip("/")
        self._wallet_origin = origin_of(self.wallet_base_url)
        self._handler = handler
        self._closed = False
        self._frame = frame_factory(self.embed_url, self.receive)

    @property
    def wallet_origin(self) -> str:
        return self._wallet_origin

    @property
    def embed_url(self) -> str:
        return self.wallet_base_url + EMBED_PATH_SUFFIX

    @property
    def closed(self) -> bool:
        return self._closed

    def set_handler(self, handler: MessageHandler) -> None:
        self._handler = handler

    def send(self, payload: Union[BaseModel, dict]) -> None:
        """JSON-encode ``payload`` and post it to the wallet frame.

        The target origin is always the wallet's, so the platform drops the
        message if the frame navigated elsewhere.
        """
        if self._closed:
            raise ChannelClosedError("Wallet channel is closed")

        if isinstance(payload, BaseModel):
            data = payload.model_dump_json()
        else:
            data = json.dumps(payload)
        self._frame.post_message(data, self._wallet_origin)

    def receive(self, origin: str, data: Any) -> None:
        """Inbound message callback registered with the frame."""
        if origin != self._wallet_origin:
            # Not from the wallet: ignore without surfacing anything
            logger.debug("wallet_message_untrusted_origin", origin=origin)
            return

        try:
            decoded = json.loads(data)
        except (TypeError, ValueError) as e:
            logger.error("wallet_message_unparseable", data=repr(data)[:200], error=str(e))
            return

        if self._handler is None:
            logger.warning("wallet_message_unhandled")
            return
        self._handler(decoded)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._frame.close()
