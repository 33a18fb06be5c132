from .mongo_connection import (
    close_client,
    get_database,
    get_customer_collection,
    get_address_collection,
    get_card_collection,
)
from .mongo_user_repository import MongoUserRepository
from .bootstrap import wait_for_database

__all__ = [
    "close_client",
    "get_database",
    "get_customer_collection",
    "get_address_collection",
    "get_card_collection",
    "MongoUserRepository",
    "wait_for_database",
]
