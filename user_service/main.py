# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api.v1 import addresses_router, cards_router, customers_router, health_router, registration_router
from .core.config import get_settings
from .di.container import get_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.bootstrap import wait_for_database
from .infrastructure.db.mongo_connection import close_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Blocks startup until MongoDB answers and the username index exists, and
    closes the client on shutdown.
    """
    settings = get_settings()
    repository = get_container().get(UserRepository)

    await wait_for_database(repository, retry_interval=settings.db_retry_interval_seconds)
    logger.info("User service started")

    yield

    close_client()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging level from settings
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    application = FastAPI(
        title="User Service API",
        version="1.0.0",
        description="Customer profiles with addresses and payment cards",
        lifespan=lifespan,
    )

    application.include_router(registration_router)
    application.include_router(customers_router, prefix="/customers")
    application.include_router(addresses_router, prefix="/addresses")
    application.include_router(cards_router, prefix="/cards")
    application.include_router(health_router)

    return application


# Create application instance
app = create_application()
