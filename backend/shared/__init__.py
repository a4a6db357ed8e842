"""
Shared infrastructure for the storefront core.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- storage: Client-side key-value storage
- exceptions: Base exception classes
- wallet_config: Wallet connectivity settings

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .storage import (
    KeyValueStorage,
    MemoryStorage,
    JsonFileStorage,
    get_storage,
    reset_storage,
)
from .exceptions import (
    StorefrontError,
    ValidationError,
    ConfigurationError,
    StorageError,
)
from .wallet_config import WalletConfig, get_wallet_config

__all__ = [
    "Settings",
    "get_settings",
    "KeyValueStorage",
    "MemoryStorage",
    "JsonFileStorage",
    "get_storage",
    "reset_storage",
    "StorefrontError",
    "ValidationError",
    "ConfigurationError",
    "StorageError",
    "WalletConfig",
    "get_wallet_config",
]
