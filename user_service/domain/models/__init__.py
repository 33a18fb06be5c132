from .address import Address
from .card import Card
from .entity_kind import EntityKind
from .references import AddressRef, CardRef, EntityRef
from .user import User

__all__ = [
    "Address",
    "AddressRef",
    "Card",
    "CardRef",
    "EntityKind",
    "EntityRef",
    "User",
]
