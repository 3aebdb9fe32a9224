"""Domain service describing how a document tree reduces to plain text.

A policy is fully determined by two strings: what a line break renders as
and what separates a non-inline element from the sibling that follows it.
``flatten`` and both offset adjustments are derived from those strings, so
the text a policy produces and the offsets it consumes always agree.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, assert_never

from pointpath.domain.common.exceptions import ValidationError
from pointpath.domain.document.nodes import ElementNode, LineBreakNode, Node, TextNode


@dataclass(frozen=True)
class FlatteningPolicy:
    """Rule set for counting line breaks and block boundaries."""

    name: str
    line_break: str
    block_separator: str

    def separator_after(self, node: Node, index: int, sibling_count: int) -> str:
        """Text inserted after ``node`` at ``index`` among ``sibling_count`` siblings."""
        if isinstance(node, ElementNode) and not node.inline and index != sibling_count - 1:
            return self.block_separator
        return ""

    def flatten(self, node: Node) -> str:
        match node:
            case TextNode():
                return node.text
            case LineBreakNode():
                return self.line_break
            case ElementNode():
                return self.flatten_children(node.children)
            case _:
                assert_never(node)

    def flatten_children(self, children: Sequence[Node], stop: int | None = None) -> str:
        """Flatten ``children[:stop]``, each followed by its separator.

        Separators are decided against the full sibling list, so a prefix
        ends with the separator that precedes ``children[stop]``.
        """
        sibling_count = len(children)
        parts: list[str] = []
        for index, child in enumerate(children[:stop]):
            parts.append(self.flatten(child))
            parts.append(self.separator_after(child, index, sibling_count))
        return "".join(parts)

    def measure_prefix(self, children: Sequence[Node], count: int) -> int:
        """Flattened length of the first ``count`` children."""
        return len(self.flatten_children(children, stop=count))

    def line_break_adjustment(self, offset: int) -> int:
        return offset - len(self.line_break)

    def element_boundary_adjustment(
        self, node: Node, index: int, sibling_count: int, offset: int
    ) -> int:
        return offset - len(self.separator_after(node, index, sibling_count))


# Offsets produced by editing: text only, nothing between nodes.
EXACT: Final = FlatteningPolicy(name="exact", line_break="", block_separator="")

# Offsets into rendered plain text: "\n" per line break, "\n\n" after blocks.
RENDERED: Final = FlatteningPolicy(name="rendered", line_break="\n", block_separator="\n\n")

_POLICIES: Final[dict[str, FlatteningPolicy]] = {
    EXACT.name: EXACT,
    RENDERED.name: RENDERED,
}


def get_policy(name: str) -> FlatteningPolicy:
    """Look up a named flattening policy."""
    try:
        return _POLICIES[name]
    except KeyError:
        raise ValidationError(
            f"Unknown flattening policy '{name}'", field="policy", value=name
        ) from None
