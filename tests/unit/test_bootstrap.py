"""
Unit tests for the startup bootstrap loop.
"""
from unittest.mock import AsyncMock, patch

import pytest

from user_service.domain.exceptions import StorageUnavailableError
from user_service.infrastructure.db.bootstrap import wait_for_database


@pytest.fixture
def mock_repo():
    repo = AsyncMock()
    return repo


class TestWaitForDatabase:
    """Tests for wait_for_database"""

    @pytest.mark.asyncio
    async def test_first_attempt_succeeds(self, mock_repo):
        attempts = await wait_for_database(mock_repo, retry_interval=0)
        assert attempts == 1
        mock_repo.ping.assert_awaited_once()
        mock_repo.ensure_indexes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_retries_until_database_answers(self, mock_repo):
        mock_repo.ping.side_effect = [
            StorageUnavailableError("down"),
            StorageUnavailableError("down"),
            None,
        ]
        with patch("user_service.infrastructure.db.bootstrap.asyncio.sleep", new=AsyncMock()) as sleep:
            attempts = await wait_for_database(mock_repo, retry_interval=2.5)

        assert attempts == 3
        assert sleep.await_count == 2
        sleep.assert_awaited_with(2.5)
        mock_repo.ensure_indexes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_index_failure_is_retried(self, mock_repo):
        mock_repo.ensure_indexes.side_effect = [StorageUnavailableError("index"), None]
        attempts = await wait_for_database(mock_repo, retry_interval=0)
        assert attempts == 2

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self, mock_repo):
        mock_repo.ping.side_effect = StorageUnavailableError("down")
        with pytest.raises(StorageUnavailableError):
            await wait_for_database(mock_repo, retry_interval=0, max_attempts=3)
        assert mock_repo.ping.await_count == 3
