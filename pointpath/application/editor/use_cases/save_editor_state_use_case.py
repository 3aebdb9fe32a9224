"""Use case for capturing the document snapshot and current selection."""

from dataclasses import dataclass

import structlog

from pointpath.application.common.transactions import ensure_outside_transaction
from pointpath.application.editor.protocols.document_snapshot_service import (
    DocumentSnapshotServiceProtocol,
)
from pointpath.application.editor.protocols.selection_repository import (
    SelectionRepositoryProtocol,
)
from pointpath.domain.common.value_objects.point_path import SelectionPath
from pointpath.domain.document.nodes import DocumentTree
from pointpath.domain.document.services.point_path_encoder import PointPathEncoder

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SavedEditorState:
    snapshot: str
    selection_path: SelectionPath | None


class SaveEditorStateUseCase:
    def __init__(
        self,
        selection_repository: SelectionRepositoryProtocol,
        snapshot_service: DocumentSnapshotServiceProtocol,
        encoder: PointPathEncoder,
    ) -> None:
        self.selection_repository = selection_repository
        self.snapshot_service = snapshot_service
        self.encoder = encoder

    def save(self, tree: DocumentTree) -> SavedEditorState:
        """
        Persist the document snapshot and the current selection.

        Without a selection, previously saved selection records are removed
        so they are never restored into a different document.

        The tree is read inside one edit transaction; the records are
        written after it closes.

        Args:
            tree: Live document tree

        Returns:
            The snapshot and selection paths that were written

        Raises:
            TransactionError: If called from inside an edit transaction
            InvalidPointError: If a selection point is not in a top-level block
        """
        ensure_outside_transaction(tree)

        with tree.transaction():
            snapshot = self.snapshot_service.export_snapshot(tree)
            selection = tree.selection
            selection_path = (
                self.encoder.encode_selection(selection) if selection is not None else None
            )

        self.selection_repository.save_snapshot(snapshot)
        if selection_path is not None:
            self.selection_repository.save_selection(selection_path)
        else:
            self.selection_repository.clear_selection()

        logger.info(
            "saved_editor_state",
            block_count=len(tree.root.children),
            anchor=selection_path.anchor.to_json() if selection_path else None,
            focus=selection_path.focus.to_json() if selection_path else None,
        )
        return SavedEditorState(snapshot=snapshot, selection_path=selection_path)
