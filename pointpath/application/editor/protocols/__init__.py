from .document_snapshot_service import DocumentSnapshotServiceProtocol
from .key_value_store import KeyValueStoreProtocol
from .selection_repository import SelectionRepositoryProtocol

__all__ = [
    "DocumentSnapshotServiceProtocol",
    "KeyValueStoreProtocol",
    "SelectionRepositoryProtocol",
]
