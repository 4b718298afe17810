"""Address detail page controller: balances, faucet and transfers."""
import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, Tuple, TypeVar
from wallet_console.config import settings
from wallet_console.controllers.navigation import Navigate, PageStatus, wallet_route
from wallet_console.models.address import Address, TransferRequest, TransferResult
from wallet_console.services.platform_adapters.base import PlatformAdapter
from wallet_console.state.async_action import ActionState, AsyncAction
from wallet_console.state.list_pager import ListPager, Page
from wallet_console.utils.errors import ActionInFlight, ValidationFailure

logger = logging.getLogger("wallet_console.controllers.address")

T = TypeVar("T")

FAUCET_SUCCESS_MESSAGE = "Faucet request successful!"


class AddressDetailController:
    """
    Drives the detail page of one address.

    Every successful mutation (faucet or transfer) is followed by exactly one
    re-fetch of the address through ``refresher``, which has its own loading
    state. Faucet and transfer requests for the address never overlap.
    """

    def __init__(
        self,
        platform: PlatformAdapter,
        wallet_id: str,
        address_id: str,
        navigate: Optional[Navigate] = None,
        page_sizes: Optional[Sequence[int]] = None,
        reset_page_on_size_change: Optional[bool] = None,
        timeout: Optional[float] = None
    ):
        self.platform = platform
        self.wallet_id = wallet_id
        self.address_id = address_id
        self.navigate = navigate
        self.address: Optional[Address] = None
        self.form = TransferRequest()
        if reset_page_on_size_change is None:
            reset_page_on_size_change = settings.reset_page_on_size_change
        if timeout is None:
            timeout = settings.request_timeout_seconds
        self.pager = ListPager(
            page_sizes or settings.balances_per_page_options,
            reset_page_on_size_change=reset_page_on_size_change,
        )
        self.loader: AsyncAction[Address] = AsyncAction(
            "load address", "Error fetching address data", timeout
        )
        self.refresher: AsyncAction[Address] = AsyncAction(
            "refresh address", "Error fetching address data", timeout
        )
        self.faucet: AsyncAction[None] = AsyncAction(
            "request faucet", "Failed to request faucet funds", timeout
        )
        self.transfer: AsyncAction[TransferResult] = AsyncAction(
            "create transfer", "Failed to create transfer", timeout
        )
        self._mutation_lock = asyncio.Lock()
        self._refresh_lock = asyncio.Lock()
        self._closed = False

    @property
    def status(self) -> PageStatus:
        state = self.loader.state
        if state.failed:
            return PageStatus.ERROR
        if state.succeeded and self.address is not None:
            return PageStatus.READY
        return PageStatus.LOADING

    @property
    def error(self) -> Optional[str]:
        return self.loader.state.error

    @property
    def faucet_message(self) -> Optional[str]:
        return FAUCET_SUCCESS_MESSAGE if self.faucet.state.succeeded else None

    @property
    def transaction_link(self) -> Optional[str]:
        if self.transfer.state.succeeded:
            return self.transfer.state.result.transaction_link
        return None

    @property
    def can_submit_transfer(self) -> bool:
        return (
            self.status is PageStatus.READY
            and self.form.is_complete()
            and not self.transfer.state.is_pending
        )

    async def load(self) -> PageStatus:
        state = await self.loader.run(self._fetch_address)
        if state.succeeded:
            self._apply(state.result)
        return self.status

    async def refresh(self) -> ActionState[Address]:
        """
        Re-read the address after a mutation.

        Refreshes queue behind each other so every mutation gets a fetch that
        starts after it completed.
        """
        async with self._refresh_lock:
            if self._closed:
                return self.refresher.state
            state = await self.refresher.run(self._fetch_address)
        if state.succeeded:
            self._apply(state.result)
        return state

    async def request_faucet(self) -> ActionState[None]:
        """
        Ask the faucet for funds, then re-fetch the address.

        The re-fetch happens after every success, whether or not balances
        changed. A failure leaves the current balances alone.
        """
        self._require_ready()
        state = await self.faucet.run(
            lambda: self._exclusive(
                lambda: self.platform.request_faucet_funds(self.wallet_id, self.address_id)
            )
        )
        if state.succeeded and not self._closed:
            await self.refresh()
        return state

    async def create_transfer(
        self,
        destination_address: str,
        amount: str,
        asset: str
    ) -> ActionState[TransferResult]:
        """
        Submit a transfer from this address.

        The form keeps what was entered unless the transfer succeeds, in which
        case it is cleared and the address is re-fetched.

        Raises:
            ActionInFlight: If a transfer is still pending; the form is left
                as it was submitted
            ValidationFailure: If a field is empty or the amount is not a
                non-negative number
        """
        self._require_ready()
        if self.transfer.state.is_pending:
            raise ActionInFlight(f"'{self.transfer.name}' is already in progress")
        self.form.destination_address = destination_address
        self.form.amount = amount
        self.form.asset = asset
        self.form.validate_for_submit()
        submitted = self.form.model_copy()

        state = await self.transfer.run(
            lambda: self._exclusive(
                lambda: self.platform.create_transfer(
                    self.wallet_id,
                    self.address_id,
                    submitted.destination_address,
                    submitted.amount,
                    submitted.asset,
                )
            )
        )
        if state.succeeded and not self._closed:
            self.form.clear()
            await self.refresh()
        return state

    def balance_entries(self) -> List[Tuple[str, str]]:
        return self.address.balance_entries() if self.address else []

    def balances_page(self) -> Page[Tuple[str, str]]:
        return self.pager.view(self.balance_entries())

    def set_page(self, page: int):
        self.pager.set_page(page)

    def set_balances_per_page(self, items_per_page: int):
        self.pager.set_items_per_page(items_per_page)

    def back_to_wallet(self):
        if self.navigate is None:
            raise RuntimeError("No navigation available")
        self.navigate(wallet_route(self.wallet_id))

    def close(self):
        """
        Leave the page.

        Responses still in flight are dropped and mutations queued behind
        another one are never sent.
        """
        self._closed = True
        for action in (self.loader, self.refresher, self.faucet, self.transfer):
            action.dispose()

    async def _fetch_address(self) -> Address:
        return await self.platform.get_address(self.wallet_id, self.address_id)

    async def _exclusive(self, operation: Callable[[], Awaitable[T]]) -> T:
        async with self._mutation_lock:
            if self._closed:
                raise ValidationFailure("Address page was closed")
            return await operation()

    def _apply(self, address: Address):
        if self._closed:
            return
        self.address = address
        self.pager.sync(len(address.balances))
        logger.info(f"Address {address.id} has {len(address.balances)} balances")

    def _require_ready(self):
        if self.status is not PageStatus.READY:
            raise ValidationFailure("Address is not loaded")
