"""
Identifier codec
----------------

Converts between MongoDB ObjectIds and the 24-character hex strings used by
the domain model. Decoding validates the string before it is used as a key so
that a malformed id is reported as InvalidFormatError rather than "not found".
"""
# Standard library imports
from typing import Any, Iterable, List

# External package imports
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.exceptions import InvalidFormatError


def new_id() -> ObjectId:
    """Generate a fresh, globally unique identifier"""
    return ObjectId()


def is_valid_id(value: Any) -> bool:
    # ObjectId.is_valid also accepts 12-byte bytes; only hex strings are external ids
    return isinstance(value, str) and ObjectId.is_valid(value)


def decode_id(value: Any) -> ObjectId:
    """
    Parse an external identifier.

    Args:
        value: 24-character hexadecimal string

    Returns:
        ObjectId for the string

    Raises:
        InvalidFormatError: If value is not a well-formed identifier
    """
    if not is_valid_id(value):
        raise InvalidFormatError(value)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise InvalidFormatError(value) from e


def decode_ids(values: Iterable[Any]) -> List[ObjectId]:
    """Decode every value or none: the first malformed one raises InvalidFormatError"""
    return [decode_id(value) for value in values]


def id_to_str(object_id: ObjectId) -> str:
    """Canonical external (lowercase hex) form of an identifier"""
    return str(object_id)
