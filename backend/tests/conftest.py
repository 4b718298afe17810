"""Shared fixtures: an in-memory wallet platform."""
import asyncio
from typing import Dict, List, Optional

import pytest

from wallet_console.models.address import Address, TransferResult
from wallet_console.models.wallet import Network, Wallet
from wallet_console.services.platform_adapters.base import PlatformAdapter
from wallet_console.utils.errors import FetchFailure


class FakePlatform(PlatformAdapter):
    """Records every call and answers from canned data."""

    def __init__(self):
        self.wallets: List[Wallet] = []
        self.address: Optional[Address] = None
        self.created = Wallet(id="w_123", network=Network.BASE_SEPOLIA)
        self.transfer_result = TransferResult(transactionLink="https://sepolia.basescan.org/tx/0xabc")
        self.errors: Dict[str, Exception] = {}
        self.gates: Dict[str, asyncio.Event] = {}
        self.calls: List[tuple] = []

    async def _record(self, name: str, *args):
        self.calls.append((name, args))
        if name in self.gates:
            await self.gates[name].wait()
        if name in self.errors:
            raise self.errors[name]

    def count(self, name: str) -> int:
        return sum(1 for call in self.calls if call[0] == name)

    async def list_wallets(self):
        await self._record("list_wallets")
        return list(self.wallets)

    async def create_wallet(self, network_id):
        await self._record("create_wallet", network_id)
        return self.created

    async def get_address(self, wallet_id, address_id):
        await self._record("get_address", wallet_id, address_id)
        if self.address is None:
            raise FetchFailure("Address not found")
        return self.address

    async def request_faucet_funds(self, wallet_id, address_id):
        await self._record("request_faucet_funds", wallet_id, address_id)

    async def create_transfer(self, wallet_id, address_id, destination_address, amount, asset):
        await self._record("create_transfer", wallet_id, address_id, destination_address, amount, asset)
        return self.transfer_result


def make_address(balances=None) -> Address:
    return Address(
        id="0xaddr",
        walletId="w_123",
        network="base-sepolia",
        balances=balances if balances is not None else {"eth": "0.5", "usdc": "12.25"},
    )


@pytest.fixture
def platform():
    fake = FakePlatform()
    fake.wallets = [
        Wallet(id=f"w_{i:03d}", network=Network.BASE_SEPOLIA if i % 2 else Network.BASE_MAINNET)
        for i in range(25)
    ]
    fake.address = make_address()
    return fake


@pytest.fixture
def address_factory():
    return make_address


@pytest.fixture
def navigated():
    return []
