# Standard library imports
from enum import Enum


class EntityKind(str, Enum):
    """The three collections managed by the user repository"""
    CUSTOMERS = "customers"
    ADDRESSES = "addresses"
    CARDS = "cards"
