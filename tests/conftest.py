"""
Shared pytest fixtures for user service tests.
"""
import os
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


def make_cursor(documents):
    """Motor-style cursor mock supporting ``async for``."""
    cursor = MagicMock()
    cursor.__aiter__.return_value = list(documents)
    return cursor


def make_collection():
    """Motor collection mock: async CRUD methods, synchronous find() returning a cursor."""
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.replace_one = AsyncMock()
    collection.update_one = AsyncMock(return_value=MagicMock(matched_count=1, modified_count=1))
    collection.update_many = AsyncMock(return_value=MagicMock(matched_count=0, modified_count=0))
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    collection.delete_many = AsyncMock(return_value=MagicMock(deleted_count=0))
    collection.create_index = AsyncMock(return_value="username_1")
    collection.find = MagicMock(return_value=make_cursor([]))
    collection.database.command = AsyncMock(return_value={"ok": 1.0})
    return collection


@pytest.fixture
def collections():
    """The three mocked collections used by MongoUserRepository."""
    return SimpleNamespace(
        customers=make_collection(),
        addresses=make_collection(),
        cards=make_collection(),
    )


@pytest.fixture
def repository(collections):
    from user_service.infrastructure.db.mongo_user_repository import MongoUserRepository

    return MongoUserRepository(
        customer_collection=collections.customers,
        address_collection=collections.addresses,
        card_collection=collections.cards,
    )


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_USER": "test",
        "MONGO_PASS": "password",
        "MONGO_HOST": "thishostshouldnotexist:3038",
        "MONGO_DB_NAME": "users",
        "PUBLIC_BASE_URL": "http://user",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_user = ""
    mock.mongo_password = ""
    mock.mongo_host = "localhost:27017"
    mock.mongo_database_name = "test_users"
    mock.mongo_timeout_seconds = 5
    mock.mongo_connect_timeout_seconds = 2
    mock.db_retry_interval_seconds = 0
    mock.public_base_url = "http://user"
    mock.log_level = "INFO"

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("user_service.core.config.get_settings", return_value=mock), patch(
        "user_service.application.use_cases.customer.register_customer.get_settings", return_value=mock
    ), patch(
        "user_service.application.use_cases.customer.get_customer.get_settings", return_value=mock
    ), patch(
        "user_service.application.use_cases.customer.list_customers.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def cursor_factory():
    """Build a cursor mock over the given documents (``collection.find.return_value = cursor_factory(docs)``)."""
    return make_cursor
