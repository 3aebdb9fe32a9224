"""Use case for rebuilding a document from its snapshot and restoring the selection."""

from dataclasses import dataclass

import structlog

from pointpath.application.common.result import Failure, Result, Success
from pointpath.application.editor.protocols.document_snapshot_service import (
    DocumentSnapshotServiceProtocol,
)
from pointpath.application.editor.protocols.selection_repository import (
    SelectionRepositoryProtocol,
)
from pointpath.application.editor.use_cases.restore_selection_use_case import (
    RestoreError,
    RestoreSelectionUseCase,
)
from pointpath.domain.document.nodes import DocumentTree, Selection
from pointpath.exceptions import SnapshotParseError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RestoredEditorState:
    tree: DocumentTree
    selection: Selection | None = None
    degraded: bool = False
    selection_error: RestoreError | None = None


class RestoreEditorStateUseCase:
    def __init__(
        self,
        selection_repository: SelectionRepositoryProtocol,
        snapshot_service: DocumentSnapshotServiceProtocol,
        restore_selection_use_case: RestoreSelectionUseCase,
    ) -> None:
        self.selection_repository = selection_repository
        self.snapshot_service = snapshot_service
        self.restore_selection_use_case = restore_selection_use_case

    def restore(self) -> Result[RestoredEditorState, RestoreError]:
        """
        Rebuild the saved document, then restore the saved selection into it.

        A document that comes back without its selection is still a
        success; the reason is carried in ``selection_error``.

        Returns:
            Success with the rebuilt tree, or Failure when there is no
            usable snapshot
        """
        snapshot = self.selection_repository.find_snapshot()
        if snapshot is None:
            logger.debug("no_saved_snapshot")
            return Failure(RestoreError.NOTHING_SAVED)

        try:
            tree = self.snapshot_service.restore_snapshot(snapshot)
        except SnapshotParseError as exc:
            logger.warning("snapshot_record_corrupt", reason=exc.reason)
            return Failure(RestoreError.CORRUPT_RECORD)

        selection_result = self.restore_selection_use_case.restore(tree)
        if selection_result.is_failure:
            error = selection_result.unwrap_error()
            logger.info("editor_state_restored_without_selection", reason=error.value)
            return Success(RestoredEditorState(tree=tree, selection_error=error))

        restored = selection_result.unwrap()
        return Success(
            RestoredEditorState(
                tree=tree,
                selection=restored.selection,
                degraded=restored.degraded,
            )
        )
