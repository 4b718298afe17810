"""Wallet models."""
from enum import Enum
from pydantic import BaseModel, Field


class Network(str, Enum):
    """Networks the platform can create wallets on."""
    BASE_SEPOLIA = "base-sepolia"
    BASE_MAINNET = "base-mainnet"


class Wallet(BaseModel):
    """Custodial wallet as returned by the platform."""
    id: str = Field(..., min_length=1, description="Platform-assigned wallet identifier")
    network: Network = Field(..., description="Network the wallet lives on")
