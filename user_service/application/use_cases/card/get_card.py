# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.card_dto import CardResponse


class GetCardUseCase:
    """Use case for getting a card by ID"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, card_id: str) -> CardResponse:
        card = await self.user_repository.get_card(card_id)
        return CardResponse.from_domain(card)
