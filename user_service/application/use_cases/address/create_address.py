# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.address_dto import AddressCreateRequest, AddressResponse

logger = logging.getLogger(__name__)


class CreateAddressUseCase:
    """Use case for creating an address, optionally linked to a customer"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: AddressCreateRequest) -> AddressResponse:
        address = await self.user_repository.create_address(request.to_domain(), request.user_id)
        logger.info(f"Created address {address.id} for customer {request.user_id or '-'}")
        return AddressResponse.from_domain(address)
