# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.config import get_settings
from ...dto.user_dto import UserResponse
from ...hypermedia import add_customer_links


class GetCustomerUseCase:
    """Use case for getting a customer with its addresses and cards resolved"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        user = await self.user_repository.get_user(user_id)
        await self.user_repository.resolve_attributes(user)
        add_customer_links(user, get_settings().public_base_url)
        return UserResponse.from_domain(user)
