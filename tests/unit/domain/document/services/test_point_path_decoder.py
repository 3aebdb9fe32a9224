"""Tests for PointPathDecoder."""

import pytest

from pointpath.domain.common.exceptions import BlockOutOfRangeError
from pointpath.domain.common.value_objects.point_path import PointPath, SelectionPath
from pointpath.domain.document.nodes import (
    DocumentTree,
    ElementNode,
    LineBreakNode,
    Point,
    PointType,
    TextNode,
)
from pointpath.domain.document.services.flattening_policy import EXACT, RENDERED
from pointpath.domain.document.services.point_path_decoder import PointPathDecoder
from pointpath.domain.document.services.point_path_encoder import PointPathEncoder


def _text(tree: DocumentTree, value: str) -> TextNode:
    return next(
        node
        for node in tree.root.iter_descendants()
        if isinstance(node, TextNode) and node.text == value
    )


def _text_points(tree: DocumentTree) -> list[Point]:
    return [
        Point.text(node, offset)
        for node in tree.root.iter_descendants()
        if isinstance(node, TextNode)
        for offset in range(node.size + 1)
    ]


def _document_order(tree: DocumentTree, point: Point) -> tuple[int, int]:
    order = {node.key: index for index, node in enumerate(tree.root.iter_descendants())}
    return order[point.node.key], point.offset


@pytest.fixture
def decoder() -> PointPathDecoder:
    return PointPathDecoder()


@pytest.fixture
def encoder() -> PointPathEncoder:
    return PointPathEncoder()


class TestDecodeRendered:
    """Test suite for decoding offsets measured in rendered text."""

    def test_block_separator_is_skipped(self, decoder, sample_tree) -> None:
        point = decoder.decode(sample_tree, PointPath(block_index=2, char_offset=4), RENDERED)
        assert point == Point.text(_text(sample_tree, "cd"), 0)

    def test_offset_inside_separator_clamps_to_next_text(self, decoder, sample_tree) -> None:
        point = decoder.decode(sample_tree, PointPath(block_index=2, char_offset=3), RENDERED)
        assert point == Point.text(_text(sample_tree, "cd"), 0)

    def test_line_break_counts_one(self, decoder, sample_tree) -> None:
        point = decoder.decode(sample_tree, PointPath(block_index=1, char_offset=2), RENDERED)
        assert point == Point.text(_text(sample_tree, "b"), 0)

    def test_end_of_block(self, decoder, sample_tree) -> None:
        point = decoder.decode(sample_tree, PointPath(block_index=2, char_offset=6), RENDERED)
        assert point == Point.text(_text(sample_tree, "cd"), 2)


class TestDecodeExact:
    """Test suite for decoding offsets measured in exact text."""

    def test_start_of_block(self, decoder, sample_tree) -> None:
        point = decoder.decode(sample_tree, PointPath(block_index=0, char_offset=0))
        assert point == Point.text(_text(sample_tree, "Hello "), 0)

    def test_inside_inline_element(self, decoder, sample_tree) -> None:
        point = decoder.decode(sample_tree, PointPath(block_index=0, char_offset=8))
        assert point == Point.text(_text(sample_tree, "bold"), 2)

    def test_shared_boundary_prefers_earlier_node(self, decoder, sample_tree) -> None:
        point = decoder.decode(sample_tree, PointPath(block_index=0, char_offset=6))
        assert point == Point.text(_text(sample_tree, "Hello "), 6)

    def test_line_break_counts_nothing(self, decoder, sample_tree) -> None:
        point = decoder.decode(sample_tree, PointPath(block_index=1, char_offset=2), EXACT)
        assert point == Point.text(_text(sample_tree, "b"), 1)

    def test_past_line_break_block_falls_back(self, decoder, sample_tree) -> None:
        resolution = decoder.resolve(sample_tree, PointPath(block_index=1, char_offset=3), EXACT)
        assert resolution.point == Point.element(sample_tree.block_at(1), 0)
        assert resolution.overrun


class TestFallbackAndErrors:
    """Test suite for the block-start fallback and decode errors."""

    def test_overrun_returns_block_start(self, decoder, sample_tree) -> None:
        block = sample_tree.block_at(0)
        for policy in (EXACT, RENDERED):
            resolution = decoder.resolve(
                sample_tree, PointPath(block_index=0, char_offset=500), policy
            )
            assert resolution.point == Point.element(block, 0)
            assert resolution.point.type is PointType.ELEMENT
            assert resolution.overrun

    def test_empty_block_is_not_an_overrun(self, decoder) -> None:
        block = ElementNode()
        tree = DocumentTree.from_blocks(block)
        resolution = decoder.resolve(tree, PointPath(block_index=0, char_offset=0))
        assert resolution.point == Point.element(block, 0)
        assert not resolution.overrun

    def test_match_is_not_an_overrun(self, decoder, sample_tree) -> None:
        resolution = decoder.resolve(sample_tree, PointPath(block_index=0, char_offset=16))
        assert not resolution.overrun

    def test_block_index_out_of_range(self, decoder, sample_tree) -> None:
        with pytest.raises(BlockOutOfRangeError) as exc_info:
            decoder.decode(sample_tree, PointPath(block_index=3, char_offset=0))
        assert exc_info.value.block_index == 3
        assert exc_info.value.block_count == 3

    def test_non_element_block_is_out_of_range(self, decoder) -> None:
        tree = DocumentTree.from_blocks(TextNode("loose"))
        with pytest.raises(BlockOutOfRangeError):
            decoder.decode(tree, PointPath(block_index=0, char_offset=0))


class TestRoundTrip:
    """Test suite for encode and decode round trips."""

    @pytest.mark.parametrize("policy", [EXACT, RENDERED], ids=["exact", "rendered"])
    def test_text_points_round_trip(self, decoder, encoder, sample_tree, policy) -> None:
        for point in _text_points(sample_tree):
            decoded = decoder.decode(sample_tree, encoder.encode(point, policy), policy)
            if point.offset > 0:
                assert decoded == point
            else:
                # Offset 0 of a node may resolve to the end of the preceding node
                assert encoder.encode(decoded, policy) == encoder.encode(point, policy)

    def test_round_trip_survives_rebuild(self, decoder, encoder, sample_tree) -> None:
        path = encoder.encode(Point.text(_text(sample_tree, " world"), 4))
        rebuilt = DocumentTree.from_blocks(
            ElementNode(
                [
                    TextNode("Hello "),
                    ElementNode([TextNode("bold")], inline=True),
                    TextNode(" world"),
                ]
            )
        )
        point = decoder.decode(rebuilt, path)
        assert point == Point.text(_text(rebuilt, " world"), 4)


class TestMonotonicity:
    """Test suite for ordering of decoded points."""

    @pytest.mark.parametrize("policy", [EXACT, RENDERED], ids=["exact", "rendered"])
    def test_larger_offsets_never_move_backwards(self, decoder, sample_tree, policy) -> None:
        for block_index, block in enumerate(sample_tree.blocks):
            keys = [
                _document_order(
                    sample_tree,
                    decoder.decode(sample_tree, PointPath(block_index, offset), policy),
                )
                for offset in range(len(policy.flatten(block)) + 1)
            ]
            assert keys == sorted(keys)


class TestPolicyMismatch:
    """Test suite for decoding with a different policy than the encoder used."""

    def test_line_break_offsets_are_not_interchangeable(
        self, decoder, encoder, sample_tree
    ) -> None:
        original = Point.text(_text(sample_tree, "b"), 1)
        decoded = decoder.decode(sample_tree, encoder.encode(original, EXACT), RENDERED)
        assert decoded != original
        assert decoded == Point.text(_text(sample_tree, "b"), 0)

    def test_block_boundary_offsets_are_not_interchangeable(
        self, decoder, encoder, sample_tree
    ) -> None:
        original = Point.text(_text(sample_tree, "cd"), 1)
        decoded = decoder.decode(sample_tree, encoder.encode(original, EXACT), RENDERED)
        assert decoded != original


class TestDecodeSelection:
    """Test suite for decoding anchor and focus pairs."""

    def test_decode_selection(self, decoder, sample_tree) -> None:
        selection = decoder.decode_selection(
            sample_tree,
            SelectionPath(
                anchor=PointPath(block_index=1, char_offset=0),
                focus=PointPath(block_index=1, char_offset=3),
            ),
            RENDERED,
        )
        assert selection.anchor == Point.text(_text(sample_tree, "a"), 0)
        assert selection.focus == Point.text(_text(sample_tree, "b"), 1)

    def test_line_break_only_block(self, decoder) -> None:
        block = ElementNode([LineBreakNode()])
        tree = DocumentTree.from_blocks(block)
        resolution = decoder.resolve(tree, PointPath(block_index=0, char_offset=1), RENDERED)
        assert resolution.point == Point.element(block, 0)
        assert not resolution.overrun
