"""Use case for selecting the first occurrence of a sentence."""

import structlog

from pointpath.domain.common.exceptions import BlockOutOfRangeError
from pointpath.domain.document.nodes import DocumentTree, Selection
from pointpath.domain.document.services.flattening_policy import RENDERED, FlatteningPolicy
from pointpath.domain.document.services.point_path_decoder import PointPathDecoder
from pointpath.domain.document.services.sentence_matcher import SentenceMatcher, build_corpus

logger = structlog.get_logger(__name__)


class HighlightSentenceUseCase:
    """Searches the rendered text of each block and selects the first match.

    The same policy instance builds the corpus and decodes the match, so
    the offsets it finds are always read back in the units they were
    counted in.
    """

    def __init__(
        self,
        decoder: PointPathDecoder,
        matcher: SentenceMatcher,
        policy: FlatteningPolicy = RENDERED,
        default_sentence: str = "",
    ) -> None:
        self.decoder = decoder
        self.matcher = matcher
        self.policy = policy
        self.default_sentence = default_sentence

    def highlight(self, tree: DocumentTree, sentence: str | None = None) -> Selection | None:
        """
        Select the first occurrence of ``sentence`` in the document.

        Args:
            tree: Live document tree
            sentence: Phrase to find; defaults to the configured sentence

        Returns:
            The applied selection, or None when no element block contains
            the phrase
        """
        target = sentence if sentence is not None else self.default_sentence

        with tree.transaction():
            corpus = build_corpus(tree, self.policy)
            match = self.matcher.find_first(corpus, target)
            if match is None:
                logger.info("sentence_not_found", sentence=target, block_count=len(corpus))
                return None

            try:
                selection = self.decoder.decode_selection(
                    tree, match.to_selection_path(), self.policy
                )
            except BlockOutOfRangeError:
                logger.warning(
                    "sentence_block_not_selectable",
                    sentence=target,
                    block_index=match.block_index,
                )
                return None
            tree.set_selection(selection)

        logger.info(
            "sentence_highlighted",
            sentence=target,
            block_index=match.block_index,
            start_offset=match.start_offset,
            end_offset=match.end_offset,
            policy=self.policy.name,
        )
        return selection
