# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.card_dto import CardResponse


class ListCardsUseCase:
    """Use case for listing all cards"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self) -> List[CardResponse]:
        cards = await self.user_repository.list_cards()
        return [CardResponse.from_domain(card) for card in cards]
