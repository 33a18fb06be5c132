# Standard library imports
from dataclasses import dataclass


@dataclass
class Card:
    """Pure domain model for a payment card"""
    id: str = ""
    long_num: str = ""
    expires: str = ""
    ccv: str = ""
