# Standard library imports
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

# Local application imports
from .address import Address
from .card import Card
from .references import AddressRef, CardRef


AddressEntry = Union[Address, AddressRef]
CardEntry = Union[Card, CardRef]
Links = Dict[str, Dict[str, str]]


@dataclass
class User:
    """
    Customer aggregate.

    Addresses and cards are either resolved entities or bare-id placeholders
    (AddressRef / CardRef). The repository returns placeholders on fetch;
    attribute resolution replaces them with full entities.
    """
    id: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    username: str = ""
    password: str = ""
    addresses: List[AddressEntry] = field(default_factory=list)
    cards: List[CardEntry] = field(default_factory=list)
    links: Optional[Links] = None

    @property
    def is_persisted(self) -> bool:
        return bool(self.id)

    @property
    def is_resolved(self) -> bool:
        """True when no placeholder is left in the address or card lists"""
        return not any(isinstance(a, AddressRef) for a in self.addresses) and not any(
            isinstance(c, CardRef) for c in self.cards
        )

    def address_ids(self) -> List[str]:
        return [address.id for address in self.addresses]

    def card_ids(self) -> List[str]:
        return [card.id for card in self.cards]
