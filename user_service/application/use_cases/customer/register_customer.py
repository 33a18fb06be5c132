# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import PartialCreateError
from ....core.config import get_settings
from ...dto.user_dto import UserRegistrationRequest, UserResponse
from ...hypermedia import add_customer_links

logger = logging.getLogger(__name__)


class RegisterCustomerUseCase:
    """Use case for registering a new customer with inline addresses and cards"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new customer

        A customer whose record was written while some of its addresses or
        cards were not is kept: it is returned with the sub-entities that
        were linked.

        Raises:
            DuplicateUsernameError: If the username is taken
            StorageUnavailableError: If the customer record could not be written
        """
        try:
            user = await self.user_repository.create_user(request.to_domain())
        except PartialCreateError as error:
            logger.warning(
                f"Customer {error.user.id} registered with missing attributes: {error.message}"
            )
            user = error.user

        logger.info(f"Registered customer {user.id} ({user.username})")
        add_customer_links(user, get_settings().public_base_url)
        return UserResponse.from_domain(user)
