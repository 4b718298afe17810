"""Abstract base class for wallet platform adapters."""
from abc import ABC, abstractmethod
from typing import List
from wallet_console.models.wallet import Wallet
from wallet_console.models.address import Address, TransferResult


class PlatformAdapter(ABC):
    """Abstract base class for the external wallet platform."""

    @abstractmethod
    async def list_wallets(self) -> List[Wallet]:
        """Fetch every wallet known to the platform."""
        pass

    @abstractmethod
    async def create_wallet(self, network_id: str) -> Wallet:
        """
        Create a wallet on a network.

        Args:
            network_id: One of the supported network identifiers

        Returns:
            The newly created wallet
        """
        pass

    @abstractmethod
    async def get_address(self, wallet_id: str, address_id: str) -> Address:
        """
        Fetch an address with its balances.

        Args:
            wallet_id: Owning wallet
            address_id: Address identifier

        Returns:
            The address
        """
        pass

    @abstractmethod
    async def request_faucet_funds(self, wallet_id: str, address_id: str) -> None:
        """Ask the test-network faucet to credit an address."""
        pass

    @abstractmethod
    async def create_transfer(
        self,
        wallet_id: str,
        address_id: str,
        destination_address: str,
        amount: str,
        asset: str
    ) -> TransferResult:
        """
        Submit an asset transfer from an address.

        Args:
            wallet_id: Owning wallet
            address_id: Source address
            destination_address: Recipient
            amount: Decimal amount as text
            asset: Asset symbol (e.g. "eth", "usdc")

        Returns:
            Transfer result holding the transaction link
        """
        pass
