from .create_card import CreateCardUseCase
from .get_card import GetCardUseCase
from .list_cards import ListCardsUseCase

__all__ = ["CreateCardUseCase", "GetCardUseCase", "ListCardsUseCase"]
