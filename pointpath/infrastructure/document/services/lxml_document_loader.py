"""Infrastructure service for building document trees from HTML."""

import logging
from typing import Final

from lxml import etree  # pyright: ignore[reportAttributeAccessIssue]

from pointpath.domain.document.nodes import (
    DocumentTree,
    ElementNode,
    LineBreakNode,
    RootNode,
    TextNode,
)

logger = logging.getLogger(__name__)

INLINE_TAGS: Final = frozenset(
    {
        "a", "abbr", "b", "bdi", "bdo", "cite", "code", "data", "dfn", "em", "i",
        "kbd", "mark", "q", "s", "samp", "small", "span", "strong", "sub", "sup",
        "time", "u", "var",
    }
)  # fmt: skip

SKIPPED_TAGS: Final = frozenset({"head", "link", "meta", "script", "style", "template", "title"})


class LxmlDocumentLoader:
    """Builds a DocumentTree by walking an HTML DOM in document order.

    Top-level elements of ``<body>`` become blocks; loose text and inline
    elements at the top level are wrapped in a paragraph block. ``<br>``
    becomes a line break and inline tags become inline elements.
    """

    def load(self, html: str | bytes) -> DocumentTree:
        """
        Build a tree from an HTML document or fragment.

        Args:
            html: HTML markup

        Returns:
            DocumentTree with one block per top-level body element
        """
        root = RootNode()
        if not html.strip():
            return DocumentTree(root)

        parser = etree.HTMLParser()
        document = etree.fromstring(html, parser)
        if document is None:
            return DocumentTree(root)

        body = document.find("body")
        container = body if body is not None else document

        loose: ElementNode | None = None

        def loose_paragraph() -> ElementNode:
            nonlocal loose
            if loose is None:
                loose = ElementNode(tag="p")
                root.append(loose)
            return loose

        if container.text and container.text.strip():
            loose_paragraph().append(TextNode(container.text))

        for element in container:
            if isinstance(element.tag, str) and element.tag not in SKIPPED_TAGS:
                node = self._convert_element(element)
                if isinstance(node, ElementNode) and not node.inline:
                    root.append(node)
                    loose = None
                else:
                    loose_paragraph().append(node)
            if element.tail and element.tail.strip():
                loose_paragraph().append(TextNode(element.tail))

        logger.info(
            "Built document tree from HTML",
            extra={"block_count": len(root.children)},
        )
        return DocumentTree(root)

    def _convert_element(self, element: etree._Element) -> ElementNode | LineBreakNode:
        tag = element.tag
        if tag == "br":
            return LineBreakNode()

        node = ElementNode(inline=tag in INLINE_TAGS, tag=tag)
        # Whitespace between block children is markup indentation, not content
        keep_blank = not self._has_block_children(element)

        self._append_text(node, element.text, keep_blank)
        for child in element:
            if isinstance(child.tag, str) and child.tag not in SKIPPED_TAGS:
                node.append(self._convert_element(child))
            self._append_text(node, child.tail, keep_blank)
        return node

    def _append_text(self, node: ElementNode, text: str | None, keep_blank: bool) -> None:
        if not text:
            return
        if not keep_blank and not text.strip():
            return
        node.append(TextNode(text))

    def _has_block_children(self, element: etree._Element) -> bool:
        return any(
            isinstance(child.tag, str) and child.tag not in INLINE_TAGS and child.tag != "br"
            for child in element
        )
