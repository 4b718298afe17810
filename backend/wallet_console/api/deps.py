"""Shared route dependencies."""
from typing import AsyncIterator, Optional
from fastapi import HTTPException
from wallet_console.services.platform_adapters.base import PlatformAdapter
from wallet_console.services.platform_adapters.http import WalletPlatformClient
from wallet_console.state.list_pager import ListPager
from wallet_console.utils.errors import ValidationFailure


async def get_platform() -> AsyncIterator[PlatformAdapter]:
    """One platform client per request."""
    async with WalletPlatformClient() as client:
        yield client


def apply_paging(pager: ListPager, page: int, per_page: Optional[int]):
    """Apply query-string paging to a synced pager, page size first."""
    try:
        if per_page is not None:
            pager.set_items_per_page(per_page)
        if page != pager.current_page:
            pager.set_page(page)
    except ValidationFailure as e:
        raise HTTPException(status_code=400, detail=str(e))
