"""Constants for domain model field names"""

from .customer_fields import CustomerFields
from .address_fields import AddressFields
from .card_fields import CardFields

__all__ = [
    "CustomerFields",
    "AddressFields",
    "CardFields",
]
