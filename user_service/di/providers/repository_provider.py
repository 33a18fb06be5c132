from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the repository implementation.
        Gets collections from database provider and creates the repository instance.
        """
        container.register_singleton(
            UserRepository,
            MongoUserRepository(
                customer_collection=container.get("customer_collection"),
                address_collection=container.get("address_collection"),
                card_collection=container.get("card_collection"),
            ),
        )
