# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ...dto.card_dto import CardCreateRequest, CardResponse

logger = logging.getLogger(__name__)


class CreateCardUseCase:
    """Use case for creating a card, optionally linked to a customer"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: CardCreateRequest) -> CardResponse:
        card = await self.user_repository.create_card(request.to_domain(), request.user_id)
        logger.info(f"Created card {card.id} for customer {request.user_id or '-'}")
        return CardResponse.from_domain(card)
