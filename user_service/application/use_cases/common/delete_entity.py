# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models import EntityKind

logger = logging.getLogger(__name__)


class DeleteEntityUseCase:
    """Use case for deleting a customer, address or card"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, entity_kind: EntityKind, entity_id: str) -> None:
        await self.user_repository.delete(entity_kind, entity_id)
        logger.info(f"Deleted {entity_kind.value} {entity_id}")
