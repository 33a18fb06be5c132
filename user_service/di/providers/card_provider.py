from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.card import (
    CreateCardUseCase,
    GetCardUseCase,
    ListCardsUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CardProvider:
    """Card use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            CreateCardUseCase,
            lambda: CreateCardUseCase(user_repository=container.get(UserRepository)),
        )
        container.register_factory(
            GetCardUseCase,
            lambda: GetCardUseCase(user_repository=container.get(UserRepository)),
        )
        container.register_factory(
            ListCardsUseCase,
            lambda: ListCardsUseCase(user_repository=container.get(UserRepository)),
        )
