from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models import Address, AddressRef


class AddressCreateRequest(BaseModel):
    """DTO for address creation request"""
    model_config = ConfigDict(populate_by_name=True)

    street: str = ""
    number: str = ""
    country: str = ""
    city: str = ""
    postcode: str = ""
    user_id: str = Field(default="", alias="userID")  # link to this customer when set

    def to_domain(self) -> Address:
        return Address(
            street=self.street,
            number=self.number,
            country=self.country,
            city=self.city,
            postcode=self.postcode,
        )


class AddressResponse(BaseModel):
    """DTO for address response (placeholders carry only the id)"""
    id: str
    street: str = ""
    number: str = ""
    country: str = ""
    city: str = ""
    postcode: str = ""

    @classmethod
    def from_domain(cls, address: Union[Address, AddressRef]) -> "AddressResponse":
        if isinstance(address, AddressRef):
            return cls(id=address.id)
        return cls(
            id=address.id,
            street=address.street,
            number=address.number,
            country=address.country,
            city=address.city,
            postcode=address.postcode,
        )
