"""SentenceMatch - location of a phrase inside the block corpus."""

from __future__ import annotations

from dataclasses import dataclass

from pointpath.domain.common.value_objects.point_path import PointPath, SelectionPath


@dataclass(frozen=True)
class SentenceMatch:
    """First occurrence of a phrase, as offsets into one block's flattened text.

    Offsets are produced by the same flattening policy that built the
    corpus, so they must be decoded with that policy as well.
    """

    block_index: int
    start_offset: int
    end_offset: int

    @property
    def length(self) -> int:
        return self.end_offset - self.start_offset

    def to_selection_path(self) -> SelectionPath:
        """Anchor at the start of the match, focus at its end."""
        return SelectionPath(
            anchor=PointPath(block_index=self.block_index, char_offset=self.start_offset),
            focus=PointPath(block_index=self.block_index, char_offset=self.end_offset),
        )
