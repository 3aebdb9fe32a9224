"""Mapper for snapshot schema ↔ DocumentTree conversion."""

from typing import assert_never

from pointpath.domain.document.nodes import (
    DocumentTree,
    ElementNode,
    LineBreakNode,
    Node,
    RootNode,
    TextNode,
)
from pointpath.infrastructure.document.schemas.snapshot_schemas import (
    DocumentSnapshotSchema,
    ElementNodeSchema,
    LineBreakNodeSchema,
    NodeSchema,
    RootSchema,
    TextNodeSchema,
)


class DocumentSnapshotMapper:
    """Mapper for snapshot schema ↔ DocumentTree conversion.

    Node keys are not part of the schema; a restored tree gets fresh keys.
    """

    def to_domain(self, schema: DocumentSnapshotSchema) -> DocumentTree:
        """Convert a snapshot schema to a new tree."""
        return DocumentTree(RootNode(self._node_to_domain(child) for child in schema.root.children))

    def to_schema(self, tree: DocumentTree) -> DocumentSnapshotSchema:
        """Convert a tree to a snapshot schema."""
        return DocumentSnapshotSchema(
            root=RootSchema(children=[self._node_to_schema(child) for child in tree.root.children])
        )

    def _node_to_domain(self, schema: NodeSchema) -> Node:
        match schema:
            case TextNodeSchema():
                return TextNode(schema.text)
            case LineBreakNodeSchema():
                return LineBreakNode()
            case ElementNodeSchema():
                return ElementNode(
                    (self._node_to_domain(child) for child in schema.children),
                    inline=schema.inline,
                    tag=schema.tag,
                )
            case _:
                assert_never(schema)

    def _node_to_schema(self, node: Node) -> NodeSchema:
        match node:
            case TextNode():
                return TextNodeSchema(text=node.text)
            case LineBreakNode():
                return LineBreakNodeSchema()
            case ElementNode():
                return ElementNodeSchema(
                    tag=node.tag,
                    inline=node.inline,
                    children=[self._node_to_schema(child) for child in node.children],
                )
            case _:
                assert_never(node)
