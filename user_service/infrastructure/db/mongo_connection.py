# Standard library imports
from typing import Optional
from urllib.parse import quote_plus

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings, get_settings
from ...domain.models import EntityKind


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def build_mongo_uri(settings: Settings) -> str:
    """
    Assemble the connection string from user/password/host settings

    Returns:
        URI of the form mongodb://[user:password@]host/<database>
    """
    credentials = ""
    if settings.mongo_user:
        credentials = f"{quote_plus(settings.mongo_user)}:{quote_plus(settings.mongo_password)}@"

    uri = f"mongodb://{credentials}{settings.mongo_host}/{settings.mongo_database_name}"
    if settings.mongo_direct_connection:
        uri += "?directConnection=true"
    return uri


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a client whose operations all fail after the configured deadline"""
    return AsyncIOMotorClient(
        build_mongo_uri(settings),
        serverSelectionTimeoutMS=int(settings.mongo_connect_timeout_seconds * 1000),
        connectTimeoutMS=int(settings.mongo_connect_timeout_seconds * 1000),
        timeoutMS=int(settings.mongo_timeout_seconds * 1000),
    )


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = get_settings()
    _mongo_client = create_client(settings)
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_client() -> None:
    """Close the singleton client, if one was opened"""
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None


def get_customer_collection() -> AsyncIOMotorCollection:
    """
    Get customers collection from MongoDB

    Returns:
        MongoDB collection for customers
    """
    return get_database()[EntityKind.CUSTOMERS.value]


def get_address_collection() -> AsyncIOMotorCollection:
    """
    Get addresses collection from MongoDB

    Returns:
        MongoDB collection for addresses
    """
    return get_database()[EntityKind.ADDRESSES.value]


def get_card_collection() -> AsyncIOMotorCollection:
    """
    Get cards collection from MongoDB

    Returns:
        MongoDB collection for cards
    """
    return get_database()[EntityKind.CARDS.value]
