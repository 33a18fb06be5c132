# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.address_dto import AddressResponse


class GetAddressUseCase:
    """Use case for getting an address by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, address_id: str) -> AddressResponse:
        address = await self.user_repository.get_address(address_id)
        return AddressResponse.from_domain(address)
