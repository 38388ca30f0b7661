import pytest
from pydantic import ValidationError

from walletlink.config import DEFAULT_WALLET_BASE_URL, WalletSettings


def test_defaults(monkeypatch):
    """Without environment overrides the public wallet is used and signing never times out."""

    for name in ("WALLET_WALLET_BASE_URL", "WALLET_SIGN_TIMEOUT_SECONDS", "WALLET_STORAGE_PATH"):
        monkeypatch.delenv(name, raising=False)

    settings = WalletSettings()

    assert settings.wallet_base_url == DEFAULT_WALLET_BASE_URL
    assert settings.sign_timeout_seconds is None
    assert settings.storage_path is None


def test_env_overrides(monkeypatch, tmp_path):
    """WALLET_-prefixed environment variables configure the client."""

    monkeypatch.setenv("WALLET_WALLET_BASE_URL", "https://wallet.example/")
    monkeypatch.setenv("WALLET_APP_KEY_PREFIX", "demo")
    monkeypatch.setenv("WALLET_SIGN_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("WALLET_STORAGE_PATH", str(tmp_path / "kv.json"))

    settings = WalletSettings()

    assert settings.wallet_base_url == "https://wallet.example"
    assert settings.app_key_prefix == "demo"
    assert settings.sign_timeout_seconds == 2.5
    assert settings.storage_path == tmp_path / "kv.json"


@pytest.mark.parametrize("timeout", [0, -1])
def test_non_positive_timeout_rejected(timeout):
    with pytest.raises(ValidationError):
        WalletSettings(sign_timeout_seconds=timeout)
