from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .customer_provider import CustomerProvider
from .address_provider import AddressProvider
from .card_provider import CardProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "CustomerProvider",
    "AddressProvider",
    "CardProvider",
]
