"""
Shared fakes for the wallet client tests: a host page and a wallet frame
that records what was posted and lets tests deliver inbound messages.
"""

import json
from typing import Any, Callable, List, Optional, Tuple

import pytest

from walletlink.auth.storage import MemoryKeyValueStore
from walletlink.config import WalletSettings


WALLET_URL = "https://wallet.example"
APP_URL = "https://app.example/page"


class FakePage:
    def __init__(self, current_url: str = APP_URL):
        self.current_url = current_url
        self.redirects: List[str] = []

    def replace(self, url: str) -> None:
        self.redirects.append(url)


class FakeFrame:
    def __init__(self, src_url: str, on_message: Callable[[str, Any], None]):
        self.src_url = src_url
        self.on_message = on_message
        self.posted: List[Tuple[str, str]] = []
        self.closed = False

    def post_message(self, data: str, target_origin: str) -> None:
        self.posted.append((data, target_origin))

    def close(self) -> None:
        self.closed = True

    @property
    def sent(self) -> List[dict]:
        return [json.loads(data) for data, _ in self.posted]

    def deliver(self, payload: Any, origin: str = WALLET_URL) -> None:
        data = payload if isinstance(payload, str) else json.dumps(payload)
        self.on_message(origin, data)


class FrameRecorder:
    """FrameFactory that keeps the frames it created."""

    def __init__(self):
        self.frames: List[FakeFrame] = []

    def __call__(self, src_url: str, on_message: Callable[[str, Any], None]) -> FakeFrame:
        frame = FakeFrame(src_url, on_message)
        self.frames.append(frame)
        return frame

    @property
    def frame(self) -> Optional[FakeFrame]:
        return self.frames[-1] if self.frames else None


@pytest.fixture
def page() -> FakePage:
    return FakePage()


@pytest.fixture
def frames() -> FrameRecorder:
    return FrameRecorder()


@pytest.fixture
def store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def wallet_settings() -> WalletSettings:
    return WalletSettings(wallet_base_url=WALLET_URL, app_key_prefix="demo")
