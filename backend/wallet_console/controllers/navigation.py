"""Console routes and the injected navigation capability."""
from enum import Enum
from typing import Callable

Navigate = Callable[[str], None]


class PageStatus(str, Enum):
    """Page-level load state."""
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


def wallet_route(wallet_id: str) -> str:
    return f"/wallets/{wallet_id}"


def address_route(wallet_id: str, address_id: str) -> str:
    return f"/wallets/{wallet_id}/addresses/{address_id}"
