"""Hypermedia links attached to customers returned over HTTP"""
from typing import Dict

from ..domain.models import User


def customer_links(base_url: str, user_id: str) -> Dict[str, Dict[str, str]]:
    href = f"{base_url.rstrip('/')}/customers/{user_id}"
    return {
        "self": {"href": href},
        "customer": {"href": href},
        "addresses": {"href": f"{href}/addresses"},
        "cards": {"href": f"{href}/cards"},
    }


def add_customer_links(user: User, base_url: str) -> User:
    """Set user.links in place and return the user"""
    user.links = customer_links(base_url, user.id)
    return user
