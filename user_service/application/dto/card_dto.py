from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from ...domain.models import Card, CardRef


class CardCreateRequest(BaseModel):
    """DTO for card creation request"""
    model_config = ConfigDict(populate_by_name=True)

    long_num: str = Field(default="", alias="longNum")
    expires: str = ""
    ccv: str = ""
    user_id: str = Field(default="", alias="userID")

    def to_domain(self) -> Card:
        return Card(long_num=self.long_num, expires=self.expires, ccv=self.ccv)


class CardResponse(BaseModel):
    """DTO for card response"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    long_num: str = Field(default="", alias="longNum")
    expires: str = ""
    ccv: str = ""

    @classmethod
    def from_domain(cls, card: Union[Card, CardRef]) -> "CardResponse":
        if isinstance(card, CardRef):
            return cls(id=card.id)
        return cls(id=card.id, long_num=card.long_num, expires=card.expires, ccv=card.ccv)
