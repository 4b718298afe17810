"""Address detail page endpoints."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from wallet_console.api.deps import apply_paging, get_platform
from wallet_console.controllers.address_detail import AddressDetailController
from wallet_console.controllers.navigation import PageStatus
from wallet_console.services.platform_adapters.base import PlatformAdapter
from wallet_console.utils.errors import ValidationFailure
from wallet_console.views import AddressDetailView, render_address_detail

router = APIRouter()


class TransferForm(BaseModel):
    """Transfer form as submitted by the user."""
    destination_address: str = Field(default="", description="Recipient address")
    amount: str = Field(default="", description="Amount as decimal text")
    asset: str = Field(default="", description="Asset symbol, e.g. eth or usdc")


async def _open_page(platform: PlatformAdapter, wallet_id: str, address_id: str) -> AddressDetailController:
    controller = AddressDetailController(platform, wallet_id, address_id)
    status = await controller.load()
    if status is PageStatus.ERROR:
        controller.close()
        raise HTTPException(status_code=502, detail=controller.error or "Address not found")
    return controller


@router.get("/{wallet_id}/addresses/{address_id}", response_model=AddressDetailView)
async def address_detail(
    wallet_id: str,
    address_id: str,
    page: int = Query(default=1, description="Balances page number"),
    per_page: Optional[int] = Query(default=None, description="Balances per page"),
    platform: PlatformAdapter = Depends(get_platform)
):
    """Render an address with a page of its balances."""
    controller = await _open_page(platform, wallet_id, address_id)
    try:
        apply_paging(controller.pager, page, per_page)
        return render_address_detail(controller)
    finally:
        controller.close()


@router.post("/{wallet_id}/addresses/{address_id}/faucet", response_model=AddressDetailView)
async def request_faucet(
    wallet_id: str,
    address_id: str,
    platform: PlatformAdapter = Depends(get_platform)
):
    """
    Request test-network funds for the address.

    Returns the page re-rendered after the follow-up balance fetch, or with
    the inline faucet error.
    """
    controller = await _open_page(platform, wallet_id, address_id)
    try:
        await controller.request_faucet()
        return render_address_detail(controller)
    finally:
        controller.close()


@router.post("/{wallet_id}/addresses/{address_id}/transfers", response_model=AddressDetailView)
async def create_transfer(
    wallet_id: str,
    address_id: str,
    form: TransferForm,
    platform: PlatformAdapter = Depends(get_platform)
):
    """
    Submit a transfer from the address.

    On failure the entered values come back in ``form`` next to the error.
    """
    controller = await _open_page(platform, wallet_id, address_id)
    try:
        try:
            await controller.create_transfer(form.destination_address, form.amount, form.asset)
        except ValidationFailure as e:
            raise HTTPException(status_code=400, detail=str(e))
        return render_address_detail(controller)
    finally:
        controller.close()
