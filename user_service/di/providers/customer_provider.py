from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.customer import (
    GetCustomerUseCase,
    ListCustomersUseCase,
    RegisterCustomerUseCase,
)
from ...application.use_cases.common import DeleteEntityUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CustomerProvider:
    """Customer use case provider - registers customer use cases and the shared delete use case"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all customer use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterCustomerUseCase,
            lambda: RegisterCustomerUseCase(user_repository=container.get(UserRepository)),
        )
        container.register_factory(
            GetCustomerUseCase,
            lambda: GetCustomerUseCase(user_repository=container.get(UserRepository)),
        )
        container.register_factory(
            ListCustomersUseCase,
            lambda: ListCustomersUseCase(user_repository=container.get(UserRepository)),
        )
        container.register_factory(
            DeleteEntityUseCase,
            lambda: DeleteEntityUseCase(user_repository=container.get(UserRepository)),
        )
