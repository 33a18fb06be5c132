# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.config import get_settings
from ...dto.user_dto import UserResponse
from ...hypermedia import add_customer_links


class ListCustomersUseCase:
    """Use case for listing all customers"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[UserResponse]:
        base_url = get_settings().public_base_url
        responses: List[UserResponse] = []
        for user in await self.user_repository.list_users():
            await self.user_repository.resolve_attributes(user)
            add_customer_links(user, base_url)
            responses.append(UserResponse.from_domain(user))
        return responses
