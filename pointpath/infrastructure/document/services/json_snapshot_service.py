"""Infrastructure service for JSON document snapshots."""

import structlog
from pydantic import ValidationError as PydanticValidationError

from pointpath.domain.document.nodes import DocumentTree
from pointpath.exceptions import SnapshotParseError
from pointpath.infrastructure.document.mappers.snapshot_mapper import DocumentSnapshotMapper
from pointpath.infrastructure.document.schemas.snapshot_schemas import DocumentSnapshotSchema

logger = structlog.get_logger(__name__)


class JsonDocumentSnapshotService:
    """Exports and restores whole documents as JSON strings."""

    def __init__(self) -> None:
        self.mapper = DocumentSnapshotMapper()

    def export_snapshot(self, tree: DocumentTree) -> str:
        return self.mapper.to_schema(tree).model_dump_json()

    def restore_snapshot(self, snapshot: str) -> DocumentTree:
        """
        Rebuild a document from a snapshot string.

        Args:
            snapshot: JSON produced by ``export_snapshot``

        Returns:
            A new tree with fresh node keys and no selection

        Raises:
            SnapshotParseError: If the snapshot is not a valid document
        """
        try:
            schema = DocumentSnapshotSchema.model_validate_json(snapshot)
        except PydanticValidationError as exc:
            raise SnapshotParseError(f"{exc.error_count()} validation error(s)") from exc

        tree = self.mapper.to_domain(schema)
        logger.debug("restored_snapshot", block_count=len(tree.root.children))
        return tree
