# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class EntityRef:
    """
    Placeholder for a sub-entity known only by its identifier.

    Users loaded from storage carry references until their attributes are
    resolved into full Address / Card objects.
    """
    id: str


@dataclass(frozen=True)
class AddressRef(EntityRef):
    """Unresolved address reference"""


@dataclass(frozen=True)
class CardRef(EntityRef):
    """Unresolved card reference"""
