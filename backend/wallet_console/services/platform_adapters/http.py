"""HTTP adapter for the wallet platform JSON API."""
import logging
from typing import Any, List, Optional
import httpx
from pydantic import BaseModel, ValidationError
from wallet_console.config import settings
from wallet_console.models.wallet import Wallet
from wallet_console.models.address import Address, TransferRequest, TransferResult
from wallet_console.services.platform_adapters.base import PlatformAdapter
from wallet_console.utils.errors import FetchFailure, PlatformError

logger = logging.getLogger("wallet_console.platform")


class WalletPlatformClient(PlatformAdapter):
    """Adapter for the wallet platform's HTTP endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or settings.platform_base_url).rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or settings.request_timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        fallback_message: str,
        json: Optional[dict] = None
    ) -> Any:
        """
        Make one request and return the decoded JSON body.

        A non-success status raises PlatformError carrying the body's
        ``error`` field, or ``fallback_message`` when there is none.
        """
        try:
            response = await self.client.request(method, path, json=json)
        except httpx.TimeoutException:
            raise PlatformError("Request timed out")
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise PlatformError(fallback_message)

        data = _decode_json(response)
        if response.is_success:
            return data

        message = fallback_message
        if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
            message = data["error"]
        logger.warning(f"{method} {path} returned {response.status_code}: {message}")
        raise PlatformError(message, status_code=response.status_code)

    async def list_wallets(self) -> List[Wallet]:
        data = await self._request("GET", "/api/wallets", "Failed to fetch wallets")
        if not isinstance(data, list):
            raise FetchFailure("Unexpected wallet list response")
        wallets = [_parse(Wallet, item, "wallet") for item in data]
        logger.info(f"Fetched {len(wallets)} wallets")
        return wallets

    async def create_wallet(self, network_id: str) -> Wallet:
        data = await self._request(
            "POST", "/api/wallets", "Failed to create wallet",
            json={"networkId": network_id}
        )
        wallet = _parse(Wallet, data, "wallet")
        logger.info(f"Created wallet {wallet.id} on {wallet.network.value}")
        return wallet

    async def get_address(self, wallet_id: str, address_id: str) -> Address:
        data = await self._request(
            "GET", _address_path(wallet_id, address_id), "Failed to fetch address data"
        )
        if data is None:
            raise FetchFailure("Address not found")
        return _parse(Address, data, "address")

    async def request_faucet_funds(self, wallet_id: str, address_id: str) -> None:
        await self._request(
            "POST", _address_path(wallet_id, address_id), "Failed to request faucet"
        )
        logger.info(f"Faucet funds requested for {wallet_id}/{address_id}")

    async def create_transfer(
        self,
        wallet_id: str,
        address_id: str,
        destination_address: str,
        amount: str,
        asset: str
    ) -> TransferResult:
        form = TransferRequest(destination_address=destination_address, amount=amount, asset=asset)
        data = await self._request(
            "POST", f"{_address_path(wallet_id, address_id)}/transfers",
            "Failed to create transfer", json=form.to_payload()
        )
        result = _parse(TransferResult, data, "transfer")
        logger.info(f"Transfer of {amount} {asset} from {address_id} submitted")
        return result


def _address_path(wallet_id: str, address_id: str) -> str:
    return f"/api/wallets/{wallet_id}/addresses/{address_id}"


def _decode_json(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def _parse(model: type[BaseModel], data: Any, what: str):
    """Validate a wire payload, failing closed on a shape mismatch."""
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Malformed {what} payload: {e}")
        raise FetchFailure(f"Unexpected {what} response from the wallet platform")
