from .address_dto import AddressCreateRequest, AddressResponse
from .card_dto import CardCreateRequest, CardResponse
from .user_dto import UserRegistrationRequest, UserResponse

__all__ = [
    "AddressCreateRequest",
    "AddressResponse",
    "CardCreateRequest",
    "CardResponse",
    "UserRegistrationRequest",
    "UserResponse",
]
