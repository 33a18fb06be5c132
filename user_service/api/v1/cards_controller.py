# Standard library imports
from typing import Dict, List

# External package imports
from fastapi import APIRouter, status

# Local application imports
from ...application.dto.card_dto import CardCreateRequest, CardResponse
from ...application.use_cases.card import (
    CreateCardUseCase,
    GetCardUseCase,
    ListCardsUseCase,
)
from ...application.use_cases.common import DeleteEntityUseCase
from ...di.container import get_container
from ...domain.exceptions import UserServiceError
from ...domain.models import EntityKind
from .dependencies import http_error


router = APIRouter(tags=["cards"])


@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
async def create_card(request: CardCreateRequest) -> CardResponse:
    """Create a card, linked to the customer given as userID (if any)"""
    container = get_container()
    create_use_case = container.get(CreateCardUseCase)

    try:
        return await create_use_case.execute(request)
    except UserServiceError as exception:
        raise http_error(exception)


@router.get("", response_model=List[CardResponse])
async def list_cards() -> List[CardResponse]:
    container = get_container()
    list_use_case = container.get(ListCardsUseCase)

    try:
        return await list_use_case.execute()
    except UserServiceError as exception:
        raise http_error(exception)


@router.get("/{card_id}", response_model=CardResponse)
async def get_card(card_id: str) -> CardResponse:
    container = get_container()
    get_use_case = container.get(GetCardUseCase)

    try:
        return await get_use_case.execute(card_id)
    except UserServiceError as exception:
        raise http_error(exception)


@router.delete("/{card_id}")
async def delete_card(card_id: str) -> Dict[str, bool]:
    container = get_container()
    delete_use_case = container.get(DeleteEntityUseCase)

    try:
        await delete_use_case.execute(EntityKind.CARDS, card_id)
    except UserServiceError as exception:
        raise http_error(exception)
    return {"status": True}
