"""Domain service locating a phrase in the per-block plain-text corpus."""

from collections.abc import Sequence

from pointpath.domain.common.value_objects.sentence_match import SentenceMatch
from pointpath.domain.document.nodes import DocumentTree
from pointpath.domain.document.services.flattening_policy import RENDERED, FlatteningPolicy


def build_corpus(tree: DocumentTree, policy: FlatteningPolicy = RENDERED) -> list[str]:
    """Flatten every block, in block order."""
    return [policy.flatten(block) for block in tree.root.children]


class SentenceMatcher:
    """Finds the first literal occurrence of a phrase across blocks.

    Only the first occurrence in the first matching block counts; this is
    plain substring search, not pattern matching.
    """

    def find_first(self, corpus: Sequence[str], target: str) -> SentenceMatch | None:
        if not target:
            return None
        for block_index, text in enumerate(corpus):
            start_offset = text.find(target)
            if start_offset == -1:
                continue
            return SentenceMatch(
                block_index=block_index,
                start_offset=start_offset,
                end_offset=start_offset + len(target),
            )
        return None
