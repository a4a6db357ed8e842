"""
Centralized configuration for the storefront core.

All settings are loaded from environment variables prefixed with TOTO_,
or from a local .env file, with sensible defaults.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_storage_path() -> Path:
    return Path.home() / ".toto" / "storage.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TOTO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Toto Finance"
    app_env: Literal["dev", "prod"] = "dev"
    debug: bool = False
    log_level: str = "INFO"

    # Client storage (persisted credential mirror)
    storage_path: Path = Field(default_factory=_default_storage_path)
    auth_token_key: str = "authToken"
    user_key: str = "user"

    # Wallet connectivity
    walletconnect_project_id: str = "YOUR_PROJECT_ID"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
