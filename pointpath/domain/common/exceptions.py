"""
Domain layer exceptions.

These exceptions represent domain-level errors raised when a position
cannot be mapped or a tree invariant is broken. They should be caught
and translated to a status by the application layer.
"""


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain exceptions should inherit from this class
    so they can be caught and handled uniformly.
    """

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class ValidationError(DomainError):
    """
    Raised when domain validation fails.

    Example: negative char offset, point offset outside its node.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        details: dict[str, object] = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details)
        self.field = field
        self.value = value


class InvalidPointError(DomainError):
    """
    Raised when a point cannot be encoded.

    The point's node has no ancestor that is a direct child of the root,
    i.e. it lives in a detached subtree or is the root itself.
    """

    def __init__(self, node_key: str, reason: str = "node has no top-level block ancestor") -> None:
        super().__init__(f"Invalid point on node {node_key}: {reason}", {"node_key": node_key})
        self.node_key = node_key
        self.reason = reason


class BlockOutOfRangeError(DomainError):
    """Raised when a block index addresses no element block of the root."""

    def __init__(self, block_index: int, block_count: int) -> None:
        message = f"Block index {block_index} out of range (root has {block_count} blocks)"
        super().__init__(message, {"block_index": block_index, "block_count": block_count})
        self.block_index = block_index
        self.block_count = block_count


class TransactionError(DomainError):
    """
    Raised when the edit-transaction discipline is violated.

    Examples: nested transactions, selection writes outside a
    transaction, persistence issued from inside one.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
