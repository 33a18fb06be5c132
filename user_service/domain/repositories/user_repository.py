from abc import ABC, abstractmethod
from typing import List, Union

from ..models.address import Address
from ..models.card import Card
from ..models.entity_kind import EntityKind
from ..models.user import User


class UserRepository(ABC):
    """
    Repository interface - defines contract for customer, address and card data access.

    Multi-step writes (user creation with embedded addresses/cards, cascading
    deletes) are not atomic. A failure between steps can leave orphaned
    address/card records or dangling references; implementations compensate
    with best-effort deletes only. Callers that retry should be idempotent.
    """

    @abstractmethod
    async def create_user(self, user: User) -> User:
        """Create a user together with its embedded addresses and cards"""
        pass

    @abstractmethod
    async def get_user(self, user_id: str) -> User:
        """Find user by ID (addresses/cards as placeholders)"""
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User:
        """Find user by exact username"""
        pass

    @abstractmethod
    async def list_users(self) -> List[User]:
        """List all users (addresses/cards as placeholders)"""
        pass

    @abstractmethod
    async def resolve_attributes(self, user: User) -> None:
        """Replace address/card placeholders on the user with full records"""
        pass

    @abstractmethod
    async def create_address(self, address: Address, user_id: str = "") -> Address:
        """Create an address, optionally linking it to a user"""
        pass

    @abstractmethod
    async def get_address(self, address_id: str) -> Address:
        """Find address by ID"""
        pass

    @abstractmethod
    async def list_addresses(self) -> List[Address]:
        """List all addresses"""
        pass

    @abstractmethod
    async def create_card(self, card: Card, user_id: str = "") -> Card:
        """Create a card, optionally linking it to a user"""
        pass

    @abstractmethod
    async def get_card(self, card_id: str) -> Card:
        """Find card by ID"""
        pass

    @abstractmethod
    async def list_cards(self) -> List[Card]:
        """List all cards"""
        pass

    @abstractmethod
    async def delete(self, entity_kind: Union[EntityKind, str], entity_id: str) -> None:
        """Delete an entity and clean up the other side of its references"""
        pass

    @abstractmethod
    async def ensure_indexes(self) -> None:
        """Create the username uniqueness index (idempotent)"""
        pass

    @abstractmethod
    async def ping(self) -> None:
        """Check that the database answers"""
        pass
