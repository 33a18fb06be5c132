# Standard library imports
import logging
from contextlib import contextmanager
from dataclasses import replace
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, TypeVar, Union

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from pymongo import ASCENDING
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models import Address, Card, EntityKind, User
from ...domain.constants import CustomerFields
from ...domain.exceptions import (
    DuplicateUsernameError,
    InvalidEntityError,
    NotFoundError,
    PartialCreateError,
    StorageUnavailableError,
)
from .identifiers import decode_id, decode_ids, id_to_str, is_valid_id, new_id
from .mappers import (
    address_to_document,
    card_to_document,
    document_to_address,
    document_to_card,
    document_to_user,
    user_to_document,
)
from .mongo_connection import get_address_collection, get_card_collection, get_customer_collection

logger = logging.getLogger(__name__)

MONGO_ID = CustomerFields.MONGO_ID

T = TypeVar("T")

# Field on the customer document that references each sub-entity kind
_REFERENCE_FIELDS = {
    EntityKind.ADDRESSES: CustomerFields.ADDRESSES,
    EntityKind.CARDS: CustomerFields.CARDS,
}


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Translate driver failures (including timeouts) into StorageUnavailableError"""
    try:
        yield
    except PyMongoError as e:
        raise StorageUnavailableError(
            f"Error {action}: {str(e)}",
            details={"cause": type(e).__name__},
        ) from e


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository.

    Customers, addresses and cards live in three collections. A customer
    document references its addresses and cards through ObjectId lists;
    integrity of those lists is kept by cascading (user delete) and
    broadcasting (address/card delete) at delete time.
    """

    def __init__(
        self,
        customer_collection: Optional[AsyncIOMotorCollection] = None,
        address_collection: Optional[AsyncIOMotorCollection] = None,
        card_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.customer_collection = customer_collection if customer_collection is not None else get_customer_collection()
        self.address_collection = address_collection if address_collection is not None else get_address_collection()
        self.card_collection = card_collection if card_collection is not None else get_card_collection()

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    async def create_user(self, user: User) -> User:
        """
        Create a user with its embedded addresses and cards

        Addresses and cards are inserted first, each under a fresh id; the
        customer document is then upserted referencing the ones that were
        written. If the upsert fails the written addresses/cards are deleted
        again (best effort).

        Args:
            user: User domain model; its id is ignored

        Returns:
            The persisted user with every id filled in

        Raises:
            InvalidEntityError: If an address or card is an id-only placeholder
            DuplicateUsernameError: If the username is already taken
            StorageUnavailableError: If the customer document could not be written
            PartialCreateError: If the customer was written but some addresses
                or cards were not; the error carries the linked user
        """
        if not user.is_resolved:
            raise InvalidEntityError(
                "New users must carry full address and card records, not id references",
                details={"username": user.username},
            )

        user_object_id = new_id()

        addresses, address_ids, address_errors = await self._insert_all(
            self.address_collection, user.addresses, address_to_document, EntityKind.ADDRESSES
        )
        cards, card_ids, card_errors = await self._insert_all(
            self.card_collection, user.cards, card_to_document, EntityKind.CARDS
        )

        document = user_to_document(user, user_object_id, address_ids, card_ids)
        try:
            await self.customer_collection.replace_one({MONGO_ID: user_object_id}, document, upsert=True)
        except PyMongoError as e:
            await self._clean_attributes(address_ids, card_ids)
            if isinstance(e, DuplicateKeyError):
                raise DuplicateUsernameError(user.username) from e
            raise StorageUnavailableError(
                f"Error saving user: {str(e)}",
                details={"cause": type(e).__name__},
            ) from e

        saved_user = replace(
            user,
            id=id_to_str(user_object_id),
            addresses=addresses,
            cards=cards,
            links=None,
        )

        errors = address_errors + card_errors
        if errors:
            raise PartialCreateError(saved_user, errors)
        return saved_user

    async def get_user(self, user_id: str) -> User:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User whose addresses and cards are AddressRef / CardRef placeholders

        Raises:
            InvalidFormatError: If user_id is not a valid identifier
            NotFoundError: If no customer has that id
        """
        object_id = decode_id(user_id)

        with _storage_errors("finding user by ID"):
            document = await self.customer_collection.find_one({MONGO_ID: object_id})
        if document is None:
            raise NotFoundError(EntityKind.CUSTOMERS.value, user_id)
        return document_to_user(document)

    async def get_user_by_username(self, username: str) -> User:
        """Find user by exact (case-sensitive) username"""
        with _storage_errors("finding user by username"):
            document = await self.customer_collection.find_one({CustomerFields.USERNAME: username})
        if document is None:
            raise NotFoundError(EntityKind.CUSTOMERS.value, username, field=CustomerFields.USERNAME)
        return document_to_user(document)

    async def list_users(self) -> List[User]:
        users: List[User] = []
        with _storage_errors("listing users"):
            async for document in self.customer_collection.find({}):
                users.append(document_to_user(document))
        return users

    async def resolve_attributes(self, user: User) -> None:
        """
        Replace the user's address/card placeholders with full records, in place

        Every id is validated before anything is fetched, so a malformed id
        leaves the user untouched. Ids with no matching record are dropped.
        A storage failure while fetching one kind is logged and leaves that
        list as it was.

        Raises:
            InvalidFormatError: If any address or card id is malformed
        """
        address_ids = decode_ids(user.address_ids())
        card_ids = decode_ids(user.card_ids())

        addresses = await self._find_by_ids(
            self.address_collection, address_ids, document_to_address, EntityKind.ADDRESSES
        )
        if addresses is not None:
            user.addresses = addresses

        cards = await self._find_by_ids(self.card_collection, card_ids, document_to_card, EntityKind.CARDS)
        if cards is not None:
            user.cards = cards

    # ------------------------------------------------------------------
    # Addresses
    # ------------------------------------------------------------------

    async def create_address(self, address: Address, user_id: str = "") -> Address:
        """
        Create a standalone address

        Args:
            address: Address to store; its id is ignored
            user_id: If given, the new address id is added to this user's addresses

        Returns:
            The stored address with its new id
        """
        object_id = await self._create_attribute(
            self.address_collection, address_to_document, address, EntityKind.ADDRESSES, user_id
        )
        return replace(address, id=id_to_str(object_id))

    async def get_address(self, address_id: str) -> Address:
        document = await self._find_one(self.address_collection, address_id, EntityKind.ADDRESSES)
        return document_to_address(document)

    async def list_addresses(self) -> List[Address]:
        addresses: List[Address] = []
        with _storage_errors("listing addresses"):
            async for document in self.address_collection.find({}):
                addresses.append(document_to_address(document))
        return addresses

    # ------------------------------------------------------------------
    # Cards
    # ------------------------------------------------------------------

    async def create_card(self, card: Card, user_id: str = "") -> Card:
        """Create a standalone card, optionally adding it to a user's cards"""
        object_id = await self._create_attribute(
            self.card_collection, card_to_document, card, EntityKind.CARDS, user_id
        )
        return replace(card, id=id_to_str(object_id))

    async def get_card(self, card_id: str) -> Card:
        document = await self._find_one(self.card_collection, card_id, EntityKind.CARDS)
        return document_to_card(document)

    async def list_cards(self) -> List[Card]:
        cards: List[Card] = []
        with _storage_errors("listing cards"):
            async for document in self.card_collection.find({}):
                cards.append(document_to_card(document))
        return cards

    # ------------------------------------------------------------------
    # Deletion
    # ------------------------------------------------------------------

    async def delete(self, entity_kind: Union[EntityKind, str], entity_id: str) -> None:
        """
        Delete an entity and clean up the other side of its references

        Customers: the user is loaded first, its addresses and cards are
        deleted, then the customer document. Addresses/cards: the id is
        pulled from every customer that references it, then the record is
        deleted.

        Args:
            entity_kind: customers, addresses or cards
            entity_id: Identifier of the record to delete

        Raises:
            InvalidEntityError: If entity_kind is not one of the three collections
            InvalidFormatError: If entity_id is not a valid identifier
            NotFoundError: If there is no such record
        """
        try:
            kind = EntityKind(entity_kind)
        except ValueError as e:
            raise InvalidEntityError(
                f"Unknown entity kind: {entity_kind!r}",
                details={"entity_kind": entity_kind},
            ) from e
        object_id = decode_id(entity_id)

        if kind is EntityKind.CUSTOMERS:
            user = await self.get_user(entity_id)
            address_ids = [ObjectId(i) for i in user.address_ids() if is_valid_id(i)]
            card_ids = [ObjectId(i) for i in user.card_ids() if is_valid_id(i)]

            with _storage_errors("deleting user attributes"):
                if address_ids:
                    await self.address_collection.delete_many({MONGO_ID: {"$in": address_ids}})
                if card_ids:
                    await self.card_collection.delete_many({MONGO_ID: {"$in": card_ids}})
        else:
            reference_field = _REFERENCE_FIELDS[kind]
            with _storage_errors(f"removing {kind.value} references"):
                await self.customer_collection.update_many(
                    {reference_field: object_id},
                    {"$pull": {reference_field: object_id}},
                )

        with _storage_errors(f"deleting from {kind.value}"):
            result = await self._collection_for(kind).delete_one({MONGO_ID: object_id})
        if result.deleted_count == 0:
            raise NotFoundError(kind.value, entity_id)

    # ------------------------------------------------------------------
    # Schema and health
    # ------------------------------------------------------------------

    async def ensure_indexes(self) -> None:
        """Create the unique username index; a no-op when it already exists"""
        with _storage_errors("creating username index"):
            await self.customer_collection.create_index(
                [(CustomerFields.USERNAME, ASCENDING)],
                unique=True,
            )

    async def ping(self) -> None:
        with _storage_errors("pinging database"):
            await self.customer_collection.database.command("ping")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _collection_for(self, kind: EntityKind) -> AsyncIOMotorCollection:
        return {
            EntityKind.CUSTOMERS: self.customer_collection,
            EntityKind.ADDRESSES: self.address_collection,
            EntityKind.CARDS: self.card_collection,
        }[kind]

    async def _find_one(
        self,
        collection: AsyncIOMotorCollection,
        entity_id: str,
        kind: EntityKind,
    ) -> Dict[str, Any]:
        object_id = decode_id(entity_id)
        with _storage_errors(f"finding {kind.value} by ID"):
            document = await collection.find_one({MONGO_ID: object_id})
        if document is None:
            raise NotFoundError(kind.value, entity_id)
        return document

    async def _insert_all(
        self,
        collection: AsyncIOMotorCollection,
        entities: Sequence[T],
        to_document: Callable[[T, ObjectId], Dict[str, Any]],
        kind: EntityKind,
    ) -> Tuple[List[T], List[ObjectId], List[Exception]]:
        """Insert each entity under a fresh id, collecting failures instead of stopping"""
        created: List[T] = []
        object_ids: List[ObjectId] = []
        errors: List[Exception] = []

        for entity in entities:
            object_id = new_id()
            try:
                await collection.insert_one(to_document(entity, object_id))
            except PyMongoError as e:
                logger.warning(f"Failed to create {kind.value} record for new user: {e}")
                errors.append(
                    StorageUnavailableError(
                        f"Error creating {kind.value}: {str(e)}",
                        details={"cause": type(e).__name__},
                    )
                )
                continue
            object_ids.append(object_id)
            created.append(replace(entity, id=id_to_str(object_id)))

        return created, object_ids, errors

    async def _clean_attributes(self, address_ids: List[ObjectId], card_ids: List[ObjectId]) -> None:
        """Compensating delete after a failed customer write; failures are logged only"""
        for collection, object_ids, kind in (
            (self.address_collection, address_ids, EntityKind.ADDRESSES),
            (self.card_collection, card_ids, EntityKind.CARDS),
        ):
            if not object_ids:
                continue
            try:
                await collection.delete_many({MONGO_ID: {"$in": object_ids}})
            except PyMongoError as e:
                logger.warning(f"Compensating delete of {len(object_ids)} {kind.value} failed: {e}")

    async def _create_attribute(
        self,
        collection: AsyncIOMotorCollection,
        to_document: Callable[[Any, ObjectId], Dict[str, Any]],
        entity: Any,
        kind: EntityKind,
        user_id: str,
    ) -> ObjectId:
        user_object_id = decode_id(user_id) if user_id else None
        object_id = new_id()

        with _storage_errors(f"creating {kind.value}"):
            await collection.insert_one(to_document(entity, object_id))

        if user_object_id is None:
            return object_id

        reference_field = _REFERENCE_FIELDS[kind]
        try:
            result = await self.customer_collection.update_one(
                {MONGO_ID: user_object_id},
                {"$addToSet": {reference_field: object_id}},
            )
        except PyMongoError as e:
            try:
                await collection.delete_one({MONGO_ID: object_id})
            except PyMongoError as cleanup_error:
                logger.warning(f"Compensating delete of {kind.value} {object_id} failed: {cleanup_error}")
            raise StorageUnavailableError(
                f"Error linking {kind.value} to user {user_id}: {str(e)}",
                details={"cause": type(e).__name__},
            ) from e

        if result.matched_count == 0:
            logger.warning(f"User {user_id} not found; {kind.value} {object_id} created without a link")
        return object_id

    async def _find_by_ids(
        self,
        collection: AsyncIOMotorCollection,
        object_ids: List[ObjectId],
        to_entity: Callable[[Dict[str, Any]], T],
        kind: EntityKind,
    ) -> Optional[List[T]]:
        """
        Batch fetch records in reference order

        Returns:
            The records that exist, or None if the fetch itself failed
        """
        if not object_ids:
            return []

        found: Dict[str, T] = {}
        try:
            async for document in collection.find({MONGO_ID: {"$in": object_ids}}):
                entity = to_entity(document)
                found[entity.id] = entity
        except PyMongoError as e:
            logger.warning(f"Could not resolve {kind.value}, leaving references unresolved: {e}")
            return None

        ordered = (found.get(id_to_str(object_id)) for object_id in object_ids)
        return [entity for entity in ordered if entity is not None]
