from .customers_controller import router as customers_router
from .customers_controller import registration_router
from .addresses_controller import router as addresses_router
from .cards_controller import router as cards_router
from .health_controller import router as health_router


__all__ = ["customers_router", "registration_router", "addresses_router", "cards_router", "health_router"]
