"""Use case for restoring a persisted selection into a live tree."""

from dataclasses import dataclass
from enum import Enum

import structlog

from pointpath.application.common.result import Failure, Result, Success
from pointpath.application.common.transactions import ensure_outside_transaction
from pointpath.application.editor.protocols.selection_repository import (
    SelectionRepositoryProtocol,
)
from pointpath.domain.common.exceptions import BlockOutOfRangeError
from pointpath.domain.document.nodes import DocumentTree, Selection
from pointpath.domain.document.services.flattening_policy import EXACT
from pointpath.domain.document.services.point_path_decoder import PointPathDecoder
from pointpath.exceptions import PathRecordParseError

logger = structlog.get_logger(__name__)


class RestoreError(str, Enum):
    """Why a restore was abandoned."""

    NOTHING_SAVED = "nothing_saved"
    OUT_OF_RANGE = "out_of_range"
    CORRUPT_RECORD = "corrupt_record"


@dataclass(frozen=True)
class RestoredSelection:
    """A restored selection.

    ``degraded`` is set when a saved offset ran past its block's text and
    the point fell back to the start of the block.
    """

    selection: Selection
    degraded: bool = False


class RestoreSelectionUseCase:
    def __init__(
        self,
        selection_repository: SelectionRepositoryProtocol,
        decoder: PointPathDecoder,
    ) -> None:
        self.selection_repository = selection_repository
        self.decoder = decoder

    def restore(self, tree: DocumentTree) -> Result[RestoredSelection, RestoreError]:
        """
        Decode the saved anchor/focus paths and apply them to the tree.

        Args:
            tree: Live document tree to restore into

        Returns:
            Success with the applied selection, or Failure with the reason
            the restore was skipped (the tree is left untouched)

        Raises:
            TransactionError: If called from inside an edit transaction
        """
        ensure_outside_transaction(tree)

        try:
            selection_path = self.selection_repository.find_selection()
        except PathRecordParseError as exc:
            logger.warning("selection_record_corrupt", reason=exc.reason)
            return Failure(RestoreError.CORRUPT_RECORD)

        if selection_path is None:
            logger.debug("no_saved_selection")
            return Failure(RestoreError.NOTHING_SAVED)

        try:
            with tree.transaction():
                anchor = self.decoder.resolve(tree, selection_path.anchor, EXACT)
                focus = self.decoder.resolve(tree, selection_path.focus, EXACT)
                selection = Selection(anchor=anchor.point, focus=focus.point)
                tree.set_selection(selection)
        except BlockOutOfRangeError as exc:
            logger.info(
                "selection_restore_out_of_range",
                block_index=exc.block_index,
                block_count=exc.block_count,
            )
            return Failure(RestoreError.OUT_OF_RANGE)

        degraded = anchor.overrun or focus.overrun
        logger.info(
            "selection_restored",
            anchor=selection_path.anchor.to_json(),
            focus=selection_path.focus.to_json(),
            degraded=degraded,
        )
        return Success(RestoredSelection(selection=selection, degraded=degraded))
