"""Application common module: Result type and transaction guards."""

from .result import Failure, Result, Success
from .transactions import ensure_outside_transaction

__all__ = ["Failure", "Result", "Success", "ensure_outside_transaction"]
