"""Document module: the owned tree model and the position codec."""

from .nodes import (
    DocumentTree,
    ElementNode,
    LineBreakNode,
    Node,
    Point,
    PointType,
    RootNode,
    Selection,
    TextNode,
)

__all__ = [
    "DocumentTree",
    "ElementNode",
    "LineBreakNode",
    "Node",
    "Point",
    "PointType",
    "RootNode",
    "Selection",
    "TextNode",
]
