"""
Startup bootstrap
-----------------

Blocks until MongoDB answers and the username index exists. This is the only
place that retries; every other repository call fails fast.
"""
# Standard library imports
import asyncio
import logging
from typing import Optional

# Local application imports
from ...domain.exceptions import StorageUnavailableError
from ...domain.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


async def wait_for_database(
    repository: UserRepository,
    retry_interval: float = 1.0,
    max_attempts: Optional[int] = None,
) -> int:
    """
    Ping the database and ensure indexes, retrying until both succeed

    Args:
        repository: Repository to bootstrap
        retry_interval: Seconds to sleep between attempts
        max_attempts: Give up after this many attempts (None retries forever)

    Returns:
        Number of attempts it took

    Raises:
        StorageUnavailableError: If max_attempts is reached without success
    """
    attempt = 0
    while True:
        attempt += 1
        try:
            await repository.ping()
            await repository.ensure_indexes()
            logger.info(f"Connected to MongoDB after {attempt} attempt(s)")
            return attempt
        except StorageUnavailableError as e:
            if max_attempts is not None and attempt >= max_attempts:
                logger.error(f"Giving up on MongoDB after {attempt} attempt(s): {e}")
                raise
            logger.warning(f"MongoDB not ready (attempt {attempt}): {e}")
            await asyncio.sleep(retry_interval)
