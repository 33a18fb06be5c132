# Standard library imports
from typing import Dict

# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...di.container import get_container
from ...domain.exceptions import StorageUnavailableError
from ...domain.repositories.user_repository import UserRepository


router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> Dict[str, str]:
    """Report whether the service can reach MongoDB"""
    repository = get_container().get(UserRepository)
    try:
        await repository.ping()
    except StorageUnavailableError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="database unreachable",
        )
    return {"service": "user", "status": "OK"}
