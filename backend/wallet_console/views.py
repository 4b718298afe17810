"""View models rendered from controller state.

Rendering is a pure function of a controller: nothing here issues requests
or mutates state.
"""
from typing import List, Optional
from pydantic import BaseModel
from wallet_console.controllers.address_detail import AddressDetailController
from wallet_console.controllers.navigation import PageStatus, address_route, wallet_route
from wallet_console.controllers.wallet_list import WalletListController
from wallet_console.state.async_action import ActionState
from wallet_console.state.list_pager import ListPager, Page


class Column(BaseModel):
    name: str
    uid: str


WALLET_COLUMNS = [
    Column(name="WALLET ID", uid="id"),
    Column(name="NETWORK", uid="network"),
]

BALANCE_COLUMNS = [
    Column(name="CURRENCY", uid="currency"),
    Column(name="AMOUNT", uid="amount"),
]


class PaginationView(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    page_sizes: List[int]
    page_numbers: List[int]
    has_previous: bool
    has_next: bool


class ActionView(BaseModel):
    status: str
    loading: bool
    error: Optional[str] = None


class WalletRow(BaseModel):
    id: str
    network: str
    href: str


class WalletListView(BaseModel):
    status: PageStatus
    error: Optional[str] = None
    columns: List[Column] = []
    wallets: List[WalletRow] = []
    pagination: Optional[PaginationView] = None
    networks: List[str] = []
    selected_network: Optional[str] = None
    can_create: bool = False
    creation: Optional[ActionView] = None
    redirect: Optional[str] = None


class BalanceRow(BaseModel):
    currency: str
    amount: str


class TransferFormView(BaseModel):
    destination_address: str
    amount: str
    asset: str
    can_submit: bool


class AddressDetailView(BaseModel):
    status: PageStatus
    error: Optional[str] = None
    address_id: str
    wallet_id: str
    network: Optional[str] = None
    back_href: str
    columns: List[Column] = []
    balances: List[BalanceRow] = []
    pagination: Optional[PaginationView] = None
    refreshing: bool = False
    refresh_error: Optional[str] = None
    faucet: Optional[ActionView] = None
    faucet_message: Optional[str] = None
    transfer: Optional[ActionView] = None
    transaction_link: Optional[str] = None
    form: Optional[TransferFormView] = None
    href: Optional[str] = None


def render_action(state: ActionState) -> ActionView:
    return ActionView(status=state.status.value, loading=state.is_pending, error=state.error)


def render_pagination(pager: ListPager, page: Page) -> PaginationView:
    return PaginationView(
        current_page=page.current_page,
        total_pages=page.total_pages,
        total_items=page.total_items,
        items_per_page=page.items_per_page,
        page_sizes=list(pager.allowed_sizes),
        page_numbers=page.page_numbers,
        has_previous=page.has_previous,
        has_next=page.has_next,
    )


def render_wallet_list(controller: WalletListController, redirect: Optional[str] = None) -> WalletListView:
    status = controller.status
    view = WalletListView(
        status=status,
        error=controller.error,
        networks=list(controller.network.options),
        selected_network=controller.network.selected,
        can_create=controller.can_create,
        creation=render_action(controller.creation.state),
        redirect=redirect,
    )
    if status is not PageStatus.READY:
        return view

    page = controller.page()
    view.columns = WALLET_COLUMNS
    view.wallets = [
        WalletRow(id=wallet.id, network=wallet.network.value, href=wallet_route(wallet.id))
        for wallet in page.page_items
    ]
    view.pagination = render_pagination(controller.pager, page)
    return view


def render_address_detail(controller: AddressDetailController) -> AddressDetailView:
    status = controller.status
    view = AddressDetailView(
        status=status,
        error=controller.error,
        address_id=controller.address_id,
        wallet_id=controller.wallet_id,
        back_href=wallet_route(controller.wallet_id),
    )
    if status is not PageStatus.READY:
        if status is PageStatus.ERROR and not view.error:
            view.error = "Address not found"
        return view

    address = controller.address
    page = controller.balances_page()
    view.network = address.network
    view.href = address_route(address.wallet_id, address.id)
    view.columns = BALANCE_COLUMNS
    view.balances = [BalanceRow(currency=currency, amount=amount) for currency, amount in page.page_items]
    view.pagination = render_pagination(controller.pager, page)
    view.refreshing = controller.refresher.state.is_pending
    view.refresh_error = controller.refresher.state.error
    view.faucet = render_action(controller.faucet.state)
    view.faucet_message = controller.faucet_message
    view.transfer = render_action(controller.transfer.state)
    view.transaction_link = controller.transaction_link
    view.form = TransferFormView(
        destination_address=controller.form.destination_address,
        amount=controller.form.amount,
        asset=controller.form.asset,
        can_submit=controller.can_submit_transfer,
    )
    return view
