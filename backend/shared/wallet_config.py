"""
Wallet connectivity configuration.

The storefront talks to a single Ethereum network chosen by the
application environment: Sepolia for development, mainnet for production.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from .config import Settings, get_settings


class ChainInfo(BaseModel):
    """An EVM network the wallet can connect to.

    Attributes:
        id: EIP-155 chain identifier
        name: Human-readable network name
    """

    model_config = {"frozen": True}

    id: int
    name: str


MAINNET = ChainInfo(id=1, name="Ethereum")
SEPOLIA = ChainInfo(id=11155111, name="Sepolia")


class WalletConfig(BaseModel):
    """Settings handed to the wallet connection layer."""

    model_config = {"frozen": True}

    app_name: str = Field(..., description="Name shown in the wallet prompt")
    project_id: str = Field(..., description="WalletConnect project identifier")
    app_env: Literal["dev", "prod"] = Field(default="dev")
    chain: ChainInfo = Field(default=SEPOLIA, description="Required network")

    @property
    def chain_id(self) -> int:
        return self.chain.id

    @property
    def chain_name(self) -> str:
        return self.chain.name


def get_wallet_config(settings: Optional[Settings] = None) -> WalletConfig:
    """Build the wallet configuration from application settings."""
    settings = settings or get_settings()
    return WalletConfig(
        app_name=settings.app_name,
        project_id=settings.walletconnect_project_id,
        app_env=settings.app_env,
        chain=MAINNET if settings.app_env == "prod" else SEPOLIA,
    )
