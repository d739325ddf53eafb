"""Example payload types for maskcopy.

This package demonstrates library usage but is not part of the core API.
"""

from .payloads import ApiKey, Card, Order, User

__all__ = [
    "ApiKey",
    "Card",
    "Order",
    "User",
]
