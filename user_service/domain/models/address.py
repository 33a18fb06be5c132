# Standard library imports
from dataclasses import dataclass


@dataclass
class Address:
    """
    Pure domain model for a postal address.

    An address lives in its own collection and is linked to zero or more
    users by reference. An empty id means the address was never persisted.
    """
    id: str = ""
    street: str = ""
    number: str = ""
    country: str = ""
    city: str = ""
    postcode: str = ""
