# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.address_dto import AddressResponse


class ListAddressesUseCase:
    """Use case for listing all addresses"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[AddressResponse]:
        addresses = await self.user_repository.list_addresses()
        return [AddressResponse.from_domain(address) for address in addresses]
