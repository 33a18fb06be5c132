"""
Integration tests for the HTTP endpoints.
Uses TestClient with mocked use cases (no real DB).
"""
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from user_service.application.dto.address_dto import AddressResponse
from user_service.application.dto.card_dto import CardResponse
from user_service.application.dto.user_dto import UserResponse
from user_service.application.use_cases.address import CreateAddressUseCase, GetAddressUseCase
from user_service.application.use_cases.card import GetCardUseCase, ListCardsUseCase
from user_service.application.use_cases.common import DeleteEntityUseCase
from user_service.application.use_cases.customer import GetCustomerUseCase, RegisterCustomerUseCase
from user_service.domain.exceptions import (
    DuplicateUsernameError,
    InvalidFormatError,
    NotFoundError,
    StorageUnavailableError,
)
from user_service.domain.models import EntityKind
from user_service.domain.repositories.user_repository import UserRepository

USER_ID = "5f1b2c3d4e5f6a7b8c9d0e1f"


@pytest.fixture
def use_cases():
    return {
        RegisterCustomerUseCase: AsyncMock(spec=RegisterCustomerUseCase),
        GetCustomerUseCase: AsyncMock(spec=GetCustomerUseCase),
        CreateAddressUseCase: AsyncMock(spec=CreateAddressUseCase),
        GetAddressUseCase: AsyncMock(spec=GetAddressUseCase),
        GetCardUseCase: AsyncMock(spec=GetCardUseCase),
        ListCardsUseCase: AsyncMock(spec=ListCardsUseCase),
        DeleteEntityUseCase: AsyncMock(spec=DeleteEntityUseCase),
        UserRepository: AsyncMock(),
    }


@pytest.fixture
def mock_container(use_cases):
    container = MagicMock()
    container.get.side_effect = lambda cls: use_cases.get(cls, None)
    return container


@pytest.fixture
def client(mock_container):
    """Create test client with mocked container and no database bootstrap."""
    from user_service.main import app

    modules = [
        "user_service.main",
        "user_service.api.v1.customers_controller",
        "user_service.api.v1.addresses_controller",
        "user_service.api.v1.cards_controller",
        "user_service.api.v1.health_controller",
    ]
    patches = [patch(f"{module}.get_container", return_value=mock_container) for module in modules]
    patches.append(patch("user_service.main.wait_for_database", new=AsyncMock(return_value=1)))
    for p in patches:
        p.start()
    try:
        with TestClient(app) as c:
            yield c
    finally:
        for p in reversed(patches):
            p.stop()


class TestCustomersAPI:
    """Tests for /register and /customers endpoints"""

    def test_register_success(self, client, use_cases):
        use_cases[RegisterCustomerUseCase].execute.return_value = UserResponse(
            id=USER_ID,
            username="u1",
            addresses=[AddressResponse(id="a1", street="Main St")],
        )
        response = client.post(
            "/register",
            json={"username": "u1", "password": "p", "addresses": [{"street": "Main St"}], "cards": []},
        )
        assert response.status_code == 201
        data = response.json()
        assert data["id"] == USER_ID
        assert data["addresses"][0]["street"] == "Main St"
        assert "password" not in data
        assert "_links" not in data

    def test_register_duplicate_returns_409(self, client, use_cases):
        use_cases[RegisterCustomerUseCase].execute.side_effect = DuplicateUsernameError("u1")
        response = client.post("/register", json={"username": "u1", "password": "p"})
        assert response.status_code == 409

    def test_register_validation_error(self, client):
        response = client.post("/register", json={"password": "p"})
        assert response.status_code == 422

    def test_get_customer_uses_camel_case_and_links(self, client, use_cases):
        use_cases[GetCustomerUseCase].execute.return_value = UserResponse(
            id=USER_ID,
            username="u1",
            first_name="First",
            cards=[CardResponse(id="c1", long_num="4111")],
            links={"self": {"href": f"http://user/customers/{USER_ID}"}},
        )
        response = client.get(f"/customers/{USER_ID}")
        assert response.status_code == 200
        data = response.json()
        assert data["firstName"] == "First"
        assert data["cards"][0]["longNum"] == "4111"
        assert data["_links"]["self"]["href"].endswith(USER_ID)

    def test_get_customer_cards(self, client, use_cases):
        use_cases[GetCustomerUseCase].execute.return_value = UserResponse(
            id=USER_ID, username="u1", cards=[CardResponse(id="c1", long_num="4111")]
        )
        response = client.get(f"/customers/{USER_ID}/cards")
        assert response.status_code == 200
        assert response.json() == [{"id": "c1", "longNum": "4111", "expires": "", "ccv": ""}]

    def test_get_customer_malformed_id_returns_400(self, client, use_cases):
        use_cases[GetCustomerUseCase].execute.side_effect = InvalidFormatError("nope")
        assert client.get("/customers/nope").status_code == 400

    def test_get_customer_not_found_returns_404(self, client, use_cases):
        use_cases[GetCustomerUseCase].execute.side_effect = NotFoundError("customers", USER_ID)
        assert client.get(f"/customers/{USER_ID}").status_code == 404

    def test_delete_customer(self, client, use_cases):
        response = client.delete(f"/customers/{USER_ID}")
        assert response.status_code == 200
        assert response.json() == {"status": True}
        use_cases[DeleteEntityUseCase].execute.assert_awaited_once_with(EntityKind.CUSTOMERS, USER_ID)


class TestAttributesAPI:
    """Tests for /addresses and /cards endpoints"""

    def test_create_address_for_user(self, client, use_cases):
        use_cases[CreateAddressUseCase].execute.return_value = AddressResponse(id="a1", street="Main St")
        response = client.post("/addresses", json={"street": "Main St", "userID": USER_ID})
        assert response.status_code == 201
        request = use_cases[CreateAddressUseCase].execute.await_args.args[0]
        assert request.user_id == USER_ID

    def test_get_address_storage_down_returns_503(self, client, use_cases):
        use_cases[GetAddressUseCase].execute.side_effect = StorageUnavailableError("timed out")
        response = client.get(f"/addresses/{USER_ID}")
        assert response.status_code == 503
        assert response.json()["detail"] == "Storage unavailable"

    def test_list_cards(self, client, use_cases):
        use_cases[ListCardsUseCase].execute.return_value = [CardResponse(id="c1", long_num="4111")]
        response = client.get("/cards")
        assert response.status_code == 200
        assert response.json()[0]["longNum"] == "4111"

    def test_delete_card(self, client, use_cases):
        assert client.delete(f"/cards/{USER_ID}").status_code == 200
        use_cases[DeleteEntityUseCase].execute.assert_awaited_once_with(EntityKind.CARDS, USER_ID)

    def test_delete_missing_address_returns_404(self, client, use_cases):
        use_cases[DeleteEntityUseCase].execute.side_effect = NotFoundError("addresses", USER_ID)
        assert client.delete(f"/addresses/{USER_ID}").status_code == 404


class TestHealthAPI:
    """Tests for /health"""

    def test_healthy(self, client, use_cases):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "OK"

    def test_database_down(self, client, use_cases):
        use_cases[UserRepository].ping.side_effect = StorageUnavailableError("down")
        assert client.get("/health").status_code == 503
