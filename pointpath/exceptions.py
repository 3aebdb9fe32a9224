"""Custom exception hierarchy for pointpath."""


class PointPathError(Exception):
    """Base exception for all pointpath errors."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class ValidationError(PointPathError):
    """Validation error."""


class PathRecordParseError(ValidationError):
    """Invalid stored path record."""

    def __init__(self, record: str, reason: str) -> None:
        """Initialize with the invalid record and reason for failure."""
        self.record = record
        self.reason = reason
        super().__init__(f"Invalid path record '{record}': {reason}")


class SnapshotParseError(ValidationError):
    """Document snapshot could not be decoded."""

    def __init__(self, reason: str) -> None:
        """Initialize with reason for failure."""
        self.reason = reason
        super().__init__(f"Invalid document snapshot: {reason}")
