# Standard library imports
from typing import Optional

# Local application imports
from .base_container import BaseContainer
from .providers import (
    AddressProvider,
    CardProvider,
    CustomerProvider,
    DatabaseProvider,
    RepositoryProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database collections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Use cases (CustomerProvider, AddressProvider, CardProvider) - depend on repositories
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → use cases
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        CustomerProvider.register(self)
        AddressProvider.register(self)
        CardProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    global _container
    _container = None
