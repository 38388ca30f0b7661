from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]

DEFAULT_WALLET_BASE_URL = "https://wallet.nearprotocol.com"


class WalletSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WALLET_",
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Wallet
    wallet_base_url: str = Field(
        default=DEFAULT_WALLET_BASE_URL,
        description="Base URL of the wallet that holds the signing keys",
    )
    app_key_prefix: str = Field(
        default="app",
        description="Prefix distinguishing multiple apps sharing one storage scope",
    )

    # Signing
    sign_timeout_seconds: Optional[float] = Field(
        default=None,
        description="Seconds to wait for a wallet signature (None waits forever)",
    )

    # Storage
    storage_path: Optional[Path] = Field(
        default=None,
        description="JSON file used to persist the session (None keeps it in memory)",
    )

    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("wallet_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("sign_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("sign_timeout_seconds must be positive")
        return v


# Global settings instance
settings = WalletSettings()
