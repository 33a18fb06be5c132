"""
Mapping between domain entities and MongoDB documents.

Storage assigns identifiers, so every *_to_document function takes the
ObjectId to store under ``_id`` and every document_to_* function copies
``_id`` back into the entity's ``id``. A customer document only stores the
ObjectId lists of its addresses and cards, never their bodies.
"""
# Standard library imports
from typing import Any, Dict, List

# External package imports
from bson import ObjectId

# Local application imports
from ...domain.constants import AddressFields, CardFields, CustomerFields
from ...domain.models import Address, AddressRef, Card, CardRef, User
from .identifiers import id_to_str


def address_to_document(address: Address, object_id: ObjectId) -> Dict[str, Any]:
    return {
        AddressFields.MONGO_ID: object_id,
        AddressFields.STREET: address.street,
        AddressFields.NUMBER: address.number,
        AddressFields.COUNTRY: address.country,
        AddressFields.CITY: address.city,
        AddressFields.POSTCODE: address.postcode,
    }


def document_to_address(document: Dict[str, Any]) -> Address:
    if not document or AddressFields.MONGO_ID not in document:
        raise ValueError("Invalid document: missing _id field")

    return Address(
        id=id_to_str(document[AddressFields.MONGO_ID]),
        street=document.get(AddressFields.STREET, ""),
        number=document.get(AddressFields.NUMBER, ""),
        country=document.get(AddressFields.COUNTRY, ""),
        city=document.get(AddressFields.CITY, ""),
        postcode=document.get(AddressFields.POSTCODE, ""),
    )


def card_to_document(card: Card, object_id: ObjectId) -> Dict[str, Any]:
    return {
        CardFields.MONGO_ID: object_id,
        CardFields.LONG_NUM: card.long_num,
        CardFields.EXPIRES: card.expires,
        CardFields.CCV: card.ccv,
    }


def document_to_card(document: Dict[str, Any]) -> Card:
    if not document or CardFields.MONGO_ID not in document:
        raise ValueError("Invalid document: missing _id field")

    return Card(
        id=id_to_str(document[CardFields.MONGO_ID]),
        long_num=document.get(CardFields.LONG_NUM, ""),
        expires=document.get(CardFields.EXPIRES, ""),
        ccv=document.get(CardFields.CCV, ""),
    )


def user_to_document(
    user: User,
    object_id: ObjectId,
    address_ids: List[ObjectId],
    card_ids: List[ObjectId],
) -> Dict[str, Any]:
    """
    Convert User domain model to a customer document

    Args:
        user: User domain model (its address/card lists are ignored)
        object_id: Identifier to store the customer under
        address_ids: Ids of the already persisted addresses to reference
        card_ids: Ids of the already persisted cards to reference

    Returns:
        Dictionary ready for MongoDB storage
    """
    return {
        CustomerFields.MONGO_ID: object_id,
        CustomerFields.FIRST_NAME: user.first_name,
        CustomerFields.LAST_NAME: user.last_name,
        CustomerFields.EMAIL: user.email,
        CustomerFields.USERNAME: user.username,
        CustomerFields.PASSWORD: user.password,
        CustomerFields.ADDRESSES: list(address_ids),
        CustomerFields.CARDS: list(card_ids),
    }


def document_to_user(document: Dict[str, Any]) -> User:
    """
    Convert a customer document to a User domain model

    Reference lists become AddressRef / CardRef placeholders; they are never
    joined here.
    """
    if not document or CustomerFields.MONGO_ID not in document:
        raise ValueError("Invalid document: missing _id field")

    return User(
        id=id_to_str(document[CustomerFields.MONGO_ID]),
        first_name=document.get(CustomerFields.FIRST_NAME, ""),
        last_name=document.get(CustomerFields.LAST_NAME, ""),
        email=document.get(CustomerFields.EMAIL, ""),
        username=document.get(CustomerFields.USERNAME, ""),
        password=document.get(CustomerFields.PASSWORD, ""),
        addresses=[AddressRef(id=id_to_str(oid)) for oid in document.get(CustomerFields.ADDRESSES) or []],
        cards=[CardRef(id=id_to_str(oid)) for oid in document.get(CustomerFields.CARDS) or []],
        links=None,
    )
