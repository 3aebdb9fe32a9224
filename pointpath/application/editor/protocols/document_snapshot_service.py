from typing import Protocol

from pointpath.domain.document.nodes import DocumentTree


class DocumentSnapshotServiceProtocol(Protocol):
    """Interface for whole-document snapshots, treated as opaque strings."""

    def export_snapshot(self, tree: DocumentTree) -> str: ...

    def restore_snapshot(self, snapshot: str) -> DocumentTree: ...
