from .create_address import CreateAddressUseCase
from .get_address import GetAddressUseCase
from .list_addresses import ListAddressesUseCase

__all__ = ["CreateAddressUseCase", "GetAddressUseCase", "ListAddressesUseCase"]
