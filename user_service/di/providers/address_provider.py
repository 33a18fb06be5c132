from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.address import (
    CreateAddressUseCase,
    GetAddressUseCase,
    ListAddressesUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AddressProvider:
    """Address use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateAddressUseCase,
            lambda: CreateAddressUseCase(user_repository=container.get(UserRepository)),
        )
        container.register_factory(
            GetAddressUseCase,
            lambda: GetAddressUseCase(user_repository=container.get(UserRepository)),
        )
        container.register_factory(
            ListAddressesUseCase,
            lambda: ListAddressesUseCase(user_repository=container.get(UserRepository)),
        )
