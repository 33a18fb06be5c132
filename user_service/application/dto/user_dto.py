from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ...domain.models import Address, Card, User
from .address_dto import AddressResponse
from .card_dto import CardResponse


class RegisterAddress(BaseModel):
    """Address embedded in a registration request"""
    street: str = ""
    number: str = ""
    country: str = ""
    city: str = ""
    postcode: str = ""


class RegisterCard(BaseModel):
    """Card embedded in a registration request"""
    model_config = ConfigDict(populate_by_name=True)

    long_num: str = Field(default="", alias="longNum")
    expires: str = ""
    ccv: str = ""


class UserRegistrationRequest(BaseModel):
    """DTO for customer registration request"""
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(min_length=1, max_length=200)
    password: str = Field(min_length=1, max_length=256)
    email: Optional[EmailStr] = None
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    addresses: List[RegisterAddress] = Field(default_factory=list)
    cards: List[RegisterCard] = Field(default_factory=list)

    def to_domain(self) -> User:
        return User(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email or "",
            username=self.username,
            password=self.password,
            addresses=[Address(**address.model_dump()) for address in self.addresses],
            cards=[Card(long_num=c.long_num, expires=c.expires, ccv=c.ccv) for c in self.cards],
        )


class UserResponse(BaseModel):
    """DTO for customer response (no password)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    username: str
    email: str = ""
    addresses: List[AddressResponse] = Field(default_factory=list)
    cards: List[CardResponse] = Field(default_factory=list)
    links: Optional[Dict[str, Dict[str, str]]] = Field(default=None, alias="_links")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            username=user.username,
            email=user.email,
            addresses=[AddressResponse.from_domain(a) for a in user.addresses],
            cards=[CardResponse.from_domain(c) for c in user.cards],
            links=user.links or None,
        )
