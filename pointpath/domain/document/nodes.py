"""
Document tree model.

An owned, in-process rendition of a rich-text document: a root whose
children are blocks, each block a tree of text, element and line-break
nodes. Parent/children links are explicit ownership. Node keys are
ephemeral, minted per session, and are never persisted; a PointPath is
the only form of a position that survives a reload.
"""

from __future__ import annotations

import itertools
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum

from pointpath.domain.common.exceptions import TransactionError, ValidationError

_key_sequence = itertools.count(1)


def _next_key() -> str:
    return str(next(_key_sequence))


class BaseNode:
    """Behaviour shared by every node kind."""

    def __init__(self) -> None:
        self.key = _next_key()
        self.parent: ElementNode | None = None

    @property
    def size(self) -> int:
        """Number of characters this node contributes with no separators."""
        raise NotImplementedError

    @property
    def text_content(self) -> str:
        """Text of this node and its descendants, with no separators."""
        raise NotImplementedError

    @property
    def index_within_parent(self) -> int | None:
        if self.parent is None:
            return None
        for index, sibling in enumerate(self.parent.children):
            if sibling is self:
                return index
        return None

    @property
    def previous_siblings(self) -> list[Node]:
        index = self.index_within_parent
        if index is None or self.parent is None:
            return []
        return self.parent.children[:index]

    def top_level_block(self) -> Node | None:
        """Return the ancestor-or-self that is a direct child of a root."""
        node: BaseNode = self
        while node.parent is not None:
            if isinstance(node.parent, RootNode):
                return node  # type: ignore[return-value]
            node = node.parent
        return None

    def root(self) -> RootNode | None:
        node: BaseNode = self
        while node.parent is not None:
            node = node.parent
        return node if isinstance(node, RootNode) else None


class TextNode(BaseNode):
    """A run of plain text."""

    def __init__(self, text: str = "") -> None:
        super().__init__()
        self.text = text

    @property
    def size(self) -> int:
        return len(self.text)

    @property
    def text_content(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"TextNode(key={self.key!r}, text={self.text!r})"


class LineBreakNode(BaseNode):
    """A soft line break inside a block."""

    @property
    def size(self) -> int:
        return 0

    @property
    def text_content(self) -> str:
        return ""

    def __repr__(self) -> str:
        return f"LineBreakNode(key={self.key!r})"


class ElementNode(BaseNode):
    """A container of nodes; non-inline elements are block-level."""

    def __init__(
        self,
        children: Iterable[Node] = (),
        *,
        inline: bool = False,
        tag: str = "paragraph",
    ) -> None:
        super().__init__()
        self.inline = inline
        self.tag = tag
        self.children: list[Node] = []
        for child in children:
            self.append(child)

    @property
    def size(self) -> int:
        return sum(child.size for child in self.children)

    @property
    def text_content(self) -> str:
        return "".join(child.text_content for child in self.children)

    @property
    def child_count(self) -> int:
        return len(self.children)

    def child_at(self, index: int) -> Node | None:
        if 0 <= index < len(self.children):
            return self.children[index]
        return None

    def append(self, child: Node) -> Node:
        """Attach child as the last child, detaching it from any previous parent."""
        if isinstance(child, RootNode):
            raise ValidationError("A root node cannot be attached to a parent")
        if child.parent is not None:
            child.parent.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: Node) -> None:
        index = child.index_within_parent
        if child.parent is not self or index is None:
            raise ValidationError(
                "Node is not a child of this element", field="key", value=child.key
            )
        del self.children[index]
        child.parent = None

    def iter_descendants(self) -> Iterator[Node]:
        """Yield every descendant in pre-order, excluding self."""
        for child in self.children:
            yield child
            if isinstance(child, ElementNode):
                yield from child.iter_descendants()

    def __repr__(self) -> str:
        return (
            f"ElementNode(key={self.key!r}, tag={self.tag!r}, inline={self.inline}, "
            f"children={len(self.children)})"
        )


class RootNode(ElementNode):
    """The single root of a document; its children are the blocks."""

    def __init__(self, children: Iterable[Node] = ()) -> None:
        super().__init__(children, inline=False, tag="root")

    def __repr__(self) -> str:
        return f"RootNode(key={self.key!r}, blocks={len(self.children)})"


Node = TextNode | ElementNode | LineBreakNode


class PointType(str, Enum):
    TEXT = "text"
    ELEMENT = "element"


@dataclass(frozen=True)
class Point:
    """A live position: a node plus a character index or child index.

    Only valid while the tree it references is alive. Nodes compare by
    identity, so two points are equal only if they reference the same node.
    """

    node: TextNode | ElementNode
    offset: int
    type: PointType

    def __post_init__(self) -> None:
        match self.node:
            case TextNode():
                if self.type is not PointType.TEXT:
                    raise ValidationError(
                        "Text nodes only take text points", field="type", value=self.type
                    )
                upper = self.node.size
            case ElementNode():
                if self.type is not PointType.ELEMENT:
                    raise ValidationError(
                        "Element nodes only take element points", field="type", value=self.type
                    )
                upper = self.node.child_count
            case _:
                raise ValidationError("Points must reference a text or element node", field="node")
        if not 0 <= self.offset <= upper:
            raise ValidationError(
                f"Point offset must be within [0, {upper}]", field="offset", value=self.offset
            )

    @classmethod
    def text(cls, node: TextNode, offset: int) -> Point:
        return cls(node=node, offset=offset, type=PointType.TEXT)

    @classmethod
    def element(cls, node: ElementNode, offset: int) -> Point:
        return cls(node=node, offset=offset, type=PointType.ELEMENT)


@dataclass(frozen=True)
class Selection:
    """Anchor/focus pair of live points."""

    anchor: Point
    focus: Point

    @property
    def is_collapsed(self) -> bool:
        return self.anchor == self.focus


class DocumentTree:
    """
    A document: one root plus the current selection.

    All selection writes happen inside ``transaction()``, which is exclusive
    across threads and refuses to nest within one thread.
    """

    def __init__(self, root: RootNode | None = None) -> None:
        self.root = root if root is not None else RootNode()
        self._lock = threading.Lock()
        self._owner: int | None = None
        self._selection: Selection | None = None

    @classmethod
    def from_blocks(cls, *blocks: Node) -> DocumentTree:
        return cls(RootNode(blocks))

    @property
    def blocks(self) -> list[Node]:
        return list(self.root.children)

    def block_at(self, index: int) -> Node | None:
        return self.root.child_at(index)

    @property
    def in_transaction(self) -> bool:
        return self._owner is not None

    @property
    def in_current_transaction(self) -> bool:
        """True when the calling thread holds the edit transaction."""
        return self._owner == threading.get_ident()

    @contextmanager
    def transaction(self) -> Iterator[DocumentTree]:
        """Open an exclusive edit transaction on this tree."""
        if self.in_current_transaction:
            raise TransactionError("Edit transactions cannot be nested")
        with self._lock:
            self._owner = threading.get_ident()
            try:
                yield self
            finally:
                self._owner = None

    @property
    def selection(self) -> Selection | None:
        return self._selection

    def set_selection(self, selection: Selection | None) -> None:
        if not self.in_current_transaction:
            raise TransactionError("Selection can only be set inside an edit transaction")
        if selection is not None:
            for point in (selection.anchor, selection.focus):
                if point.node.root() is not self.root:
                    raise ValidationError(
                        "Selection point is not attached to this document",
                        field="key",
                        value=point.node.key,
                    )
        self._selection = selection
