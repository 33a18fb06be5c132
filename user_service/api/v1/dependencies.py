# Standard library imports
import logging

# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...domain.exceptions import (
    DuplicateUsernameError,
    InvalidEntityError,
    InvalidFormatError,
    NotFoundError,
    StorageUnavailableError,
    UserServiceError,
)

logger = logging.getLogger(__name__)


_STATUS_BY_ERROR = (
    (InvalidFormatError, status.HTTP_400_BAD_REQUEST),
    (InvalidEntityError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateUsernameError, status.HTTP_409_CONFLICT),
    (StorageUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def http_error(exception: UserServiceError) -> HTTPException:
    """
    Map a user service error to the HTTP exception returned to the client

    Storage failures are logged with their cause and reported without the
    driver's message.
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exception, error_type):
            if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
                logger.error(f"Storage unavailable: {exception.message}")
                return HTTPException(status_code=status_code, detail="Storage unavailable")
            return HTTPException(status_code=status_code, detail=exception.message)

    logger.error(f"Unhandled user service error: {exception.message}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=exception.message)
