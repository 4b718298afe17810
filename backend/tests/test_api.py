"""Console HTTP surface tests."""
import pytest
from fastapi.testclient import TestClient

from wallet_console.api.deps import get_platform
from wallet_console.main import app
from wallet_console.utils.errors import PlatformError

PREFIX = "/api/v1/console/wallets"


@pytest.fixture
def client(platform):
    app.dependency_overrides[get_platform] = lambda: platform
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_wallet_list_first_page(client):
    response = client.get(PREFIX)

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert len(body["wallets"]) == 10
    assert body["wallets"][0]["href"] == "/wallets/w_000"
    assert [c["name"] for c in body["columns"]] == ["WALLET ID", "NETWORK"]
    assert body["pagination"]["total_pages"] == 3
    assert body["pagination"]["has_previous"] is False
    assert body["networks"] == ["base-sepolia", "base-mainnet"]
    assert body["can_create"] is False


def test_wallet_list_last_page(client):
    body = client.get(PREFIX, params={"page": 3}).json()

    assert [w["id"] for w in body["wallets"]] == [f"w_{i:03d}" for i in range(20, 25)]
    assert body["pagination"]["has_next"] is False


def test_wallet_list_rejects_bad_paging(client):
    assert client.get(PREFIX, params={"page": 4}).status_code == 400
    assert client.get(PREFIX, params={"per_page": 15}).status_code == 400


def test_wallet_list_fetch_failure(client, platform):
    platform.errors["list_wallets"] = PlatformError("Failed to fetch wallets", status_code=500)

    response = client.get(PREFIX)

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch wallets"


def test_create_wallet_redirects(client):
    response = client.post(PREFIX, json={"network_id": "base-sepolia"})

    assert response.status_code == 200
    assert response.json()["redirect"] == "/wallets/w_123"


def test_create_wallet_unknown_network(client, platform):
    response = client.post(PREFIX, json={"network_id": "solana"})

    assert response.status_code == 400
    assert platform.count("create_wallet") == 0


def test_create_wallet_failure_inline(client, platform):
    platform.errors["create_wallet"] = PlatformError("Failed to create wallet", status_code=500)

    body = client.post(PREFIX, json={"network_id": "base-mainnet"}).json()

    assert body["redirect"] is None
    assert body["creation"]["error"] == "Failed to create wallet"
    assert body["selected_network"] == "base-mainnet"


def test_address_detail(client):
    body = client.get(f"{PREFIX}/w_123/addresses/0xaddr").json()

    assert body["status"] == "ready"
    assert body["back_href"] == "/wallets/w_123"
    assert body["balances"] == [
        {"currency": "eth", "amount": "0.5"},
        {"currency": "usdc", "amount": "12.25"},
    ]
    assert body["pagination"]["items_per_page"] == 5
    assert body["pagination"]["page_sizes"] == [5, 10, 20, 50]


def test_address_not_found(client, platform):
    platform.address = None

    response = client.get(f"{PREFIX}/w_123/addresses/0xaddr")

    assert response.status_code == 502
    assert response.json()["detail"] == "Address not found"


def test_faucet(client, platform):
    body = client.post(f"{PREFIX}/w_123/addresses/0xaddr/faucet").json()

    assert body["faucet_message"] == "Faucet request successful!"
    assert body["faucet"]["status"] == "succeeded"
    assert platform.count("get_address") == 2


def test_transfer_failure_returns_form(client, platform):
    platform.errors["create_transfer"] = PlatformError("insufficient funds", status_code=400)

    body = client.post(
        f"{PREFIX}/w_123/addresses/0xaddr/transfers",
        json={"destination_address": "0xdest", "amount": "0.000001", "asset": "eth"},
    ).json()

    assert body["transfer"]["error"] == "insufficient funds"
    assert body["form"]["destination_address"] == "0xdest"
    assert body["form"]["amount"] == "0.000001"
    assert body["form"]["asset"] == "eth"


def test_transfer_success_returns_link(client):
    body = client.post(
        f"{PREFIX}/w_123/addresses/0xaddr/transfers",
        json={"destination_address": "0xdest", "amount": "1", "asset": "eth"},
    ).json()

    assert body["transaction_link"] == "https://sepolia.basescan.org/tx/0xabc"
    assert body["form"]["amount"] == ""


def test_transfer_validation(client, platform):
    response = client.post(
        f"{PREFIX}/w_123/addresses/0xaddr/transfers",
        json={"destination_address": "0xdest", "amount": "-3", "asset": "eth"},
    )

    assert response.status_code == 400
    assert platform.count("create_transfer") == 0
