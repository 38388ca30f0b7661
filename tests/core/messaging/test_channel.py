import json
from unittest.mock import MagicMock

import pytest

from walletlink.core.messaging.channel import MessageChannel
from walletlink.core.messaging.models import SignTransactionAction
from walletlink.errors import ChannelClosedError


WALLET_URL = "https://wallet.example"


@pytest.fixture
def handler() -> MagicMock:
    return MagicMock()


@pytest.fixture
def channel(frames, handler) -> MessageChannel:
    return MessageChannel(WALLET_URL, frames, handler=handler)


def test_creates_one_frame_on_embed_endpoint(channel, frames):
    assert len(frames.frames) == 1
    assert frames.frame.src_url == "https://wallet.example/embed/"
    assert channel.wallet_origin == "https://wallet.example"


def test_wallet_origin_drops_default_port_and_path():
    recorder = MagicMock()
    channel = MessageChannel("https://Wallet.Example:443/base/", recorder)

    assert channel.wallet_origin == "https://wallet.example"
    recorder.assert_called_once_with("https://Wallet.Example:443/base/embed/", channel.receive)


def test_send_targets_wallet_origin(channel, frames):
    channel.send({"action": "ping", "n": 1})

    data, target = frames.frame.posted[0]
    assert target == "https://wallet.example"
    assert target != "*"
    assert json.loads(data) == {"action": "ping", "n": 1}


def test_send_model_encodes_bytes_hash_as_base64(channel, frames):
    channel.send(
        SignTransactionAction(
            token="T1",
            method_name="transfer",
            args={"amount": "1"},
            hash=b"\x01\x02\x03",
            request_id="R",
        )
    )

    assert frames.frame.sent[0] == {
        "action": "sign_transaction",
        "token": "T1",
        "method_name": "transfer",
        "args": {"amount": "1"},
        "hash": "AQID",
        "request_id": "R",
    }


def test_trusted_message_is_decoded_and_forwarded(channel, frames, handler):
    frames.frame.deliver({"request_id": "R", "success": True, "result": "SIG"})

    handler.assert_called_once_with({"request_id": "R", "success": True, "result": "SIG"})


@pytest.mark.parametrize(
    "origin",
    [
        "https://evil.example",
        "http://wallet.example",
        "https://wallet.example:8443",
        "https://wallet.example.evil.example",
        "https://wallet.example/",
        "null",
        "",
    ],
)
def test_untrusted_origin_is_dropped(channel, frames, handler, origin):
    frames.frame.deliver({"request_id": "R", "success": True, "result": "SIG"}, origin=origin)

    handler.assert_not_called()


@pytest.mark.parametrize("data", ["{not json", "", None, b"\xff"])
def test_unparseable_message_is_dropped(channel, frames, handler, data):
    frames.frame.on_message(WALLET_URL, data)

    handler.assert_not_called()


def test_message_without_handler_is_dropped(frames):
    MessageChannel(WALLET_URL, frames)

    frames.frame.deliver({"request_id": "R"})


def test_set_handler_rewires_inbound(channel, frames, handler):
    replacement = MagicMock()
    channel.set_handler(replacement)

    frames.frame.deliver({"request_id": "R"})

    replacement.assert_called_once_with({"request_id": "R"})
    handler.assert_not_called()


def test_close_is_idempotent_and_blocks_send(channel, frames):
    channel.close()
    channel.close()

    assert frames.frame.closed is True
    assert channel.closed is True
    with pytest.raises(ChannelClosedError):
        channel.send({"action": "ping"})
