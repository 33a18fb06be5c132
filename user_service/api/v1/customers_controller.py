# Standard library imports
from typing import Dict, List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.address_dto import AddressResponse
from ...application.dto.card_dto import CardResponse
from ...application.dto.user_dto import UserRegistrationRequest, UserResponse
from ...application.use_cases.customer import (
    GetCustomerUseCase,
    ListCustomersUseCase,
    RegisterCustomerUseCase,
)
from ...application.use_cases.common import DeleteEntityUseCase
from ...di.container import get_container
from ...domain.exceptions import UserServiceError
from ...domain.models import EntityKind
from .dependencies import http_error


router = APIRouter(tags=["customers"])
registration_router = APIRouter(tags=["customers"])


@registration_router.post(
    "/register",
    response_model=UserResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def register(request: UserRegistrationRequest) -> UserResponse:
    """
    Register a customer with inline addresses and cards

    Args:
        request: Registration request

    Returns:
        UserResponse with the new ids
    """
    container = get_container()
    register_use_case = container.get(RegisterCustomerUseCase)

    try:
        return await register_use_case.execute(request)
    except UserServiceError as exception:
        raise http_error(exception)


@router.get("", response_model=List[UserResponse], response_model_exclude_none=True)
async def list_customers() -> List[UserResponse]:
    container = get_container()
    list_use_case = container.get(ListCustomersUseCase)

    try:
        return await list_use_case.execute()
    except UserServiceError as exception:
        raise http_error(exception)


@router.get("/{customer_id}", response_model=UserResponse, response_model_exclude_none=True)
async def get_customer(customer_id: str) -> UserResponse:
    """
    Get a customer by ID, with addresses and cards resolved

    Args:
        customer_id: ID of the customer

    Returns:
        UserResponse with customer information
    """
    return await _load_customer(customer_id)


@router.get("/{customer_id}/addresses", response_model=List[AddressResponse])
async def get_customer_addresses(customer_id: str) -> List[AddressResponse]:
    customer = await _load_customer(customer_id)
    return customer.addresses


@router.get("/{customer_id}/cards", response_model=List[CardResponse])
async def get_customer_cards(customer_id: str) -> List[CardResponse]:
    customer = await _load_customer(customer_id)
    return customer.cards


@router.delete("/{customer_id}")
async def delete_customer(customer_id: str) -> Dict[str, bool]:
    """Delete a customer together with its addresses and cards"""
    container = get_container()
    delete_use_case = container.get(DeleteEntityUseCase)

    try:
        await delete_use_case.execute(EntityKind.CUSTOMERS, customer_id)
    except UserServiceError as exception:
        raise http_error(exception)
    return {"status": True}


async def _load_customer(customer_id: str) -> UserResponse:
    container = get_container()
    get_use_case = container.get(GetCustomerUseCase)

    try:
        return await get_use_case.execute(customer_id)
    except UserServiceError as exception:
        raise http_error(exception)
