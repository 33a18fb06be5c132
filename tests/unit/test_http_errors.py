"""
Unit tests for mapping user service errors to HTTP responses.
"""
import pytest

from user_service.api.v1.dependencies import http_error
from user_service.domain.exceptions import (
    DuplicateUsernameError,
    InvalidEntityError,
    InvalidFormatError,
    NotFoundError,
    StorageUnavailableError,
    UserServiceError,
)


@pytest.mark.parametrize(
    "error, status_code",
    [
        (InvalidFormatError("x"), 400),
        (InvalidEntityError("Unknown entity kind: 'orders'"), 400),
        (NotFoundError("cards", "5f1b2c3d4e5f6a7b8c9d0e1f"), 404),
        (DuplicateUsernameError("u1"), 409),
        (StorageUnavailableError("Error finding user: connection refused"), 503),
        (UserServiceError("unexpected"), 500),
    ],
)
def test_status_codes(error, status_code):
    assert http_error(error).status_code == status_code


def test_storage_detail_does_not_leak_driver_text():
    exception = http_error(StorageUnavailableError("Error pinging database: 10.0.0.3:27017 refused"))
    assert "27017" not in exception.detail
