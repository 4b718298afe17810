"""Home page controller: wallet table, network choice and wallet creation."""
import logging
from typing import List, Optional, Sequence
from wallet_console.config import settings
from wallet_console.controllers.navigation import Navigate, PageStatus, wallet_route
from wallet_console.models.wallet import Wallet
from wallet_console.services.platform_adapters.base import PlatformAdapter
from wallet_console.state.async_action import ActionState, AsyncAction
from wallet_console.state.list_pager import ListPager, Page
from wallet_console.state.single_select import SingleSelect
from wallet_console.utils.errors import ValidationFailure

logger = logging.getLogger("wallet_console.controllers.wallets")


class WalletListController:
    """
    Drives the wallet list page.

    Loading -> Error | Ready. Once ready, the full wallet collection is kept
    unpaginated and sliced through the pager on every render.
    """

    def __init__(
        self,
        platform: PlatformAdapter,
        navigate: Navigate,
        networks: Optional[Sequence[str]] = None,
        page_sizes: Optional[Sequence[int]] = None,
        reset_page_on_size_change: Optional[bool] = None,
        timeout: Optional[float] = None
    ):
        self.platform = platform
        self.navigate = navigate
        self.wallets: List[Wallet] = []
        if reset_page_on_size_change is None:
            reset_page_on_size_change = settings.reset_page_on_size_change
        if timeout is None:
            timeout = settings.request_timeout_seconds
        self.pager = ListPager(
            page_sizes or settings.wallets_per_page_options,
            reset_page_on_size_change=reset_page_on_size_change,
        )
        self.network = SingleSelect(networks or settings.supported_networks)
        self.loader: AsyncAction[List[Wallet]] = AsyncAction(
            "load wallets", "Failed to load wallets. Please try again later.", timeout
        )
        self.creation: AsyncAction[Wallet] = AsyncAction(
            "create wallet", "Failed to create wallet", timeout
        )
        self._closed = False

    @property
    def status(self) -> PageStatus:
        state = self.loader.state
        if state.failed:
            return PageStatus.ERROR
        if state.succeeded:
            return PageStatus.READY
        return PageStatus.LOADING

    @property
    def error(self) -> Optional[str]:
        return self.loader.state.error

    @property
    def can_create(self) -> bool:
        return (
            self.status is PageStatus.READY
            and not self.network.is_empty()
            and not self.creation.state.is_pending
        )

    async def load(self) -> PageStatus:
        """Fetch all wallets once."""
        state = await self.loader.run(self.platform.list_wallets)
        if state.succeeded and not self._closed:
            self.wallets = list(state.result)
            self.pager.sync(len(self.wallets))
            logger.info(f"Wallet list ready with {len(self.wallets)} wallets")
        return self.status

    def select_network(self, network_id: str):
        self.network.select(network_id)

    async def create_wallet(self) -> ActionState[Wallet]:
        """
        Create a wallet on the selected network and open it.

        The loaded collection is left as is; the new wallet shows up on the
        next visit of the list.
        """
        if self.network.is_empty():
            raise ValidationFailure("Select a network before creating a wallet")
        network_id = self.network.selected

        state = await self.creation.run(lambda: self.platform.create_wallet(network_id))
        if state.succeeded and not self._closed:
            self.navigate(wallet_route(state.result.id))
        return state

    def open_wallet(self, wallet_id: str):
        self.navigate(wallet_route(wallet_id))

    def set_page(self, page: int):
        self.pager.set_page(page)

    def set_wallets_per_page(self, items_per_page: int):
        self.pager.set_items_per_page(items_per_page)

    def page(self) -> Page[Wallet]:
        return self.pager.view(self.wallets)

    def close(self):
        """Leave the page; responses still in flight are dropped."""
        self._closed = True
        self.loader.dispose()
        self.creation.dispose()
