"""Domain service reconstructing live points from PointPaths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import assert_never

import structlog

from pointpath.domain.common.exceptions import BlockOutOfRangeError
from pointpath.domain.common.value_objects.point_path import PointPath, SelectionPath
from pointpath.domain.document.nodes import (
    DocumentTree,
    ElementNode,
    LineBreakNode,
    Node,
    Point,
    Selection,
    TextNode,
)
from pointpath.domain.document.services.flattening_policy import EXACT, FlatteningPolicy

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PointResolution:
    """Decoded point plus whether the offset ran past the block's text."""

    point: Point
    overrun: bool = False


class PointPathDecoder:
    """Decodes a PointPath against a live tree.

    The policy must be the one that produced the offset: exact for paths
    captured by ``PointPathEncoder``, rendered for offsets found in the
    plain-text corpus. A mismatch yields a wrong point, not an error.
    """

    def resolve(
        self, tree: DocumentTree, path: PointPath, policy: FlatteningPolicy = EXACT
    ) -> PointResolution:
        """
        Resolve a path to a point, reporting offset overruns.

        Args:
            tree: Live document tree
            path: Portable position to reconstruct
            policy: Flattening policy the char offset was measured in

        Returns:
            PointResolution whose point is a text position on a match, or
            the element position (block, 0) when no text node matched

        Raises:
            BlockOutOfRangeError: If the block index addresses no element block
        """
        block = tree.block_at(path.block_index)
        if not isinstance(block, ElementNode):
            raise BlockOutOfRangeError(path.block_index, len(tree.root.children))

        target, remaining = self._find_target(block, path.char_offset, policy)
        if target is None:
            overrun = remaining > 0
            if overrun:
                logger.debug(
                    "decode_offset_overrun",
                    block_index=path.block_index,
                    char_offset=path.char_offset,
                    overrun_by=remaining,
                    policy=policy.name,
                )
            return PointResolution(point=Point.element(block, 0), overrun=overrun)

        offset = min(max(remaining, 0), target.size)
        return PointResolution(point=Point.text(target, offset))

    def decode(
        self, tree: DocumentTree, path: PointPath, policy: FlatteningPolicy = EXACT
    ) -> Point:
        return self.resolve(tree, path, policy).point

    def decode_selection(
        self, tree: DocumentTree, selection_path: SelectionPath, policy: FlatteningPolicy = EXACT
    ) -> Selection:
        return Selection(
            anchor=self.decode(tree, selection_path.anchor, policy),
            focus=self.decode(tree, selection_path.focus, policy),
        )

    def _find_target(
        self, node: Node, remaining: int, policy: FlatteningPolicy
    ) -> tuple[TextNode | None, int]:
        # Pre-order walk; a text node matches when the remaining count fits in it.
        match node:
            case TextNode():
                if remaining <= node.size:
                    return node, remaining
                return None, remaining - node.size
            case LineBreakNode():
                return None, policy.line_break_adjustment(remaining)
            case ElementNode():
                sibling_count = node.child_count
                for index, child in enumerate(node.children):
                    target, remaining = self._find_target(child, remaining, policy)
                    if target is not None:
                        return target, remaining
                    remaining = policy.element_boundary_adjustment(
                        child, index, sibling_count, remaining
                    )
                return None, remaining
            case _:
                assert_never(node)
