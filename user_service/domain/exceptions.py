"""
Exception hierarchy for the user service.

Repository operations raise these instead of driver errors so the transport
layer can map each kind to a status code. The original driver error, when
there is one, is chained as ``__cause__``.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from .models.user import User


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class UserServiceError(Exception):
    """Base exception for all user service errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Caller errors
# -----------------------------------------------------------------------------


class InvalidFormatError(UserServiceError):
    """Raised when a supplied identifier is not a well-formed ObjectId hex string."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid Id Hex: {value!r}", details={"value": value})
        self.value = value


class InvalidEntityError(UserServiceError):
    """Raised when a request names an unknown entity kind or carries records that cannot be stored."""
    pass


class NotFoundError(UserServiceError):
    """Raised when no record matches the given key (the id unless ``field`` says otherwise)."""

    def __init__(self, entity_kind: str, identifier: str, field: str = "id"):
        super().__init__(
            f"No {entity_kind} record found with {field} {identifier!r}",
            details={"entity_kind": entity_kind, field: identifier},
        )
        self.entity_kind = entity_kind
        self.identifier = identifier
        self.field = field


class DuplicateUsernameError(UserServiceError):
    """Raised when the username uniqueness constraint rejects a write."""

    def __init__(self, username: str):
        super().__init__(f"Username {username!r} already exists", details={"username": username})
        self.username = username


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class StorageUnavailableError(UserServiceError):
    """Raised when MongoDB is unreachable, times out, or returns an unexpected fault."""
    pass


class PartialCreateError(UserServiceError):
    """
    Raised by user creation when the customer record was written but one or
    more embedded addresses or cards could not be.

    ``user`` holds the persisted, partially linked user so the caller can
    proceed with it or delete it.
    """

    def __init__(self, user: "User", errors: List[Exception]):
        summary = "; ".join(str(error) for error in errors)
        super().__init__(
            f"attribute errors: {summary}",
            details={"user_id": user.id, "error_count": len(errors)},
        )
        self.user = user
        self.errors = errors
