"""
Domain common module.

Contains the exception hierarchy and value objects shared by the
document model and the position codec.
"""

from .exceptions import (
    BlockOutOfRangeError,
    DomainError,
    InvalidPointError,
    TransactionError,
    ValidationError,
)

__all__ = [
    "BlockOutOfRangeError",
    "DomainError",
    "InvalidPointError",
    "TransactionError",
    "ValidationError",
]
