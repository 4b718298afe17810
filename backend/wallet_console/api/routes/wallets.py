"""Wallet list page endpoints."""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from wallet_console.api.deps import apply_paging, get_platform
from wallet_console.controllers.navigation import PageStatus
from wallet_console.controllers.wallet_list import WalletListController
from wallet_console.services.platform_adapters.base import PlatformAdapter
from wallet_console.utils.errors import ValidationFailure
from wallet_console.views import WalletListView, render_wallet_list

router = APIRouter()


class CreateWalletForm(BaseModel):
    """Wallet creation form."""
    network_id: str = Field(..., description="Network to create the wallet on")


@router.get("", response_model=WalletListView)
async def wallet_list(
    page: int = Query(default=1, description="Page number, starting at 1"),
    per_page: Optional[int] = Query(default=None, description="Wallets per page"),
    platform: PlatformAdapter = Depends(get_platform)
):
    """
    Render the wallet list page.

    Loads every wallet, then slices the requested page.
    """
    controller = WalletListController(platform, navigate=lambda path: None)
    try:
        status = await controller.load()
        if status is PageStatus.ERROR:
            raise HTTPException(status_code=502, detail=controller.error)
        apply_paging(controller.pager, page, per_page)
        return render_wallet_list(controller)
    finally:
        controller.close()


@router.post("", response_model=WalletListView)
async def create_wallet(
    form: CreateWalletForm,
    platform: PlatformAdapter = Depends(get_platform)
):
    """
    Create a wallet on the chosen network.

    On success the view carries the new wallet's route in ``redirect``. On
    failure the error is returned inline with the selection kept.
    """
    navigated: List[str] = []
    controller = WalletListController(platform, navigate=navigated.append)
    try:
        try:
            controller.select_network(form.network_id)
            await controller.create_wallet()
        except ValidationFailure as e:
            raise HTTPException(status_code=400, detail=str(e))
        return render_wallet_list(controller, redirect=navigated[-1] if navigated else None)
    finally:
        controller.close()
