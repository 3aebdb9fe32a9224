"""Domain service converting live points into portable PointPaths."""

from typing import assert_never

from pointpath.domain.common.exceptions import InvalidPointError
from pointpath.domain.common.value_objects.point_path import PointPath, SelectionPath
from pointpath.domain.document.nodes import (
    ElementNode,
    LineBreakNode,
    Point,
    Selection,
    TextNode,
)
from pointpath.domain.document.services.flattening_policy import EXACT, FlatteningPolicy


class PointPathEncoder:
    """Encodes a Point as (block index, char offset).

    The offset counts characters from the start of the point's top-level
    block. With the default exact policy that is text only, which is how
    offsets look when a selection is captured during editing.
    """

    def encode(self, point: Point, policy: FlatteningPolicy = EXACT) -> PointPath:
        """
        Encode a live point.

        Args:
            point: Text or element position inside an attached tree
            policy: Flattening policy the offset should be measured in

        Returns:
            PointPath addressing the same logical text position

        Raises:
            InvalidPointError: If the node has no top-level block ancestor
        """
        node = point.node
        block = node.top_level_block()
        if block is None:
            raise InvalidPointError(node.key)

        match node:
            case TextNode():
                char_offset = point.offset
            case ElementNode():
                char_offset = policy.measure_prefix(node.children, point.offset)
            case LineBreakNode():
                raise InvalidPointError(node.key, "line breaks are not point targets")
            case _:
                assert_never(node)

        current = node
        while current is not block:
            parent = current.parent
            index = current.index_within_parent
            if parent is None or index is None:
                raise InvalidPointError(node.key)
            char_offset += policy.measure_prefix(parent.children, index)
            current = parent

        block_index = block.index_within_parent
        if block_index is None:
            raise InvalidPointError(node.key)
        return PointPath(block_index=block_index, char_offset=char_offset)

    def encode_selection(
        self, selection: Selection, policy: FlatteningPolicy = EXACT
    ) -> SelectionPath:
        return SelectionPath(
            anchor=self.encode(selection.anchor, policy),
            focus=self.encode(selection.focus, policy),
        )
