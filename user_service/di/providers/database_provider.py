from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_database,
    get_customer_collection,
    get_address_collection,
    get_card_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database and its three collections in the container.
        This is the ONLY place where database connections are registered.
        """
        container.register_singleton("database", get_database())
        container.register_singleton("customer_collection", get_customer_collection())
        container.register_singleton("address_collection", get_address_collection())
        container.register_singleton("card_collection", get_card_collection())
