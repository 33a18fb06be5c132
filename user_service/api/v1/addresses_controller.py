# Standard library imports
from typing import Dict, List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.address_dto import AddressCreateRequest, AddressResponse
from ...application.use_cases.address import (
    CreateAddressUseCase,
    GetAddressUseCase,
    ListAddressesUseCase,
)
from ...application.use_cases.common import DeleteEntityUseCase
from ...di.container import get_container
from ...domain.exceptions import UserServiceError
from ...domain.models import EntityKind
from .dependencies import http_error


router = APIRouter(tags=["addresses"])


@router.post("", response_model=AddressResponse, status_code=status.HTTP_201_CREATED)
async def create_address(request: AddressCreateRequest) -> AddressResponse:
    """
    Create an address, linked to the customer given as userID (if any)

    Args:
        request: Address creation request

    Returns:
        AddressResponse with the new id
    """
    container = get_container()
    create_use_case = container.get(CreateAddressUseCase)

    try:
        return await create_use_case.execute(request)
    except UserServiceError as exception:
        raise http_error(exception)


@router.get("", response_model=List[AddressResponse])
async def list_addresses() -> List[AddressResponse]:
    container = get_container()
    list_use_case = container.get(ListAddressesUseCase)

    try:
        return await list_use_case.execute()
    except UserServiceError as exception:
        raise http_error(exception)


@router.get("/{address_id}", response_model=AddressResponse)
async def get_address(address_id: str) -> AddressResponse:
    container = get_container()
    get_use_case = container.get(GetAddressUseCase)

    try:
        return await get_use_case.execute(address_id)
    except UserServiceError as exception:
        raise http_error(exception)


@router.delete("/{address_id}")
async def delete_address(address_id: str) -> Dict[str, bool]:
    """Delete an address and remove it from every customer"""
    container = get_container()
    delete_use_case = container.get(DeleteEntityUseCase)

    try:
        await delete_use_case.execute(EntityKind.ADDRESSES, address_id)
    except UserServiceError as exception:
        raise http_error(exception)
    return {"status": True}
