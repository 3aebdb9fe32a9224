from .json_snapshot_service import JsonDocumentSnapshotService
from .lxml_document_loader import LxmlDocumentLoader

__all__ = ["JsonDocumentSnapshotService", "LxmlDocumentLoader"]
