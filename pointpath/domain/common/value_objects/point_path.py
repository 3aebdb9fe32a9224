"""
PointPath value objects for portable cursor positions.

PointPath = position within a document as (block_index, char_offset)
- block_index: ordinal of the top-level block under the root
- char_offset: character count into the block's flattened text

Unlike a live Point, a PointPath holds no node references, so it survives
the document being torn down and rebuilt.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from typing import Self

from pointpath.domain.common.exceptions import ValidationError


class PointPathDict(TypedDict):
    """Wire representation of PointPath."""

    rootIndex: int
    textOffset: int


class SelectionPathDict(TypedDict):
    """Wire representation of SelectionPath."""

    anchor: PointPathDict
    focus: PointPathDict


@dataclass(frozen=True, order=True)
class PointPath:
    """A portable position, comparable by document order."""

    block_index: int
    char_offset: int = 0

    def __post_init__(self) -> None:
        if self.block_index < 0:
            raise ValidationError(
                "block_index must be non-negative", field="block_index", value=self.block_index
            )
        if self.char_offset < 0:
            raise ValidationError(
                "char_offset must be non-negative", field="char_offset", value=self.char_offset
            )

    def to_json(self) -> PointPathDict:
        """Serialize to the wire format {"rootIndex": n, "textOffset": m}."""
        return {"rootIndex": self.block_index, "textOffset": self.char_offset}

    @classmethod
    def from_json(cls, data: PointPathDict) -> Self:
        """Deserialize from the wire format."""
        return cls(block_index=data["rootIndex"], char_offset=data["textOffset"])


@dataclass(frozen=True)
class SelectionPath:
    """Portable anchor/focus pair for a selection."""

    anchor: PointPath
    focus: PointPath

    @property
    def is_collapsed(self) -> bool:
        """Whether anchor and focus address the same position."""
        return self.anchor == self.focus

    def to_json(self) -> SelectionPathDict:
        return {"anchor": self.anchor.to_json(), "focus": self.focus.to_json()}

    @classmethod
    def from_json(cls, data: SelectionPathDict) -> Self:
        return cls(
            anchor=PointPath.from_json(data["anchor"]),
            focus=PointPath.from_json(data["focus"]),
        )
