"""Position codec services: flattening policies, encoder, decoder, matcher."""

from .flattening_policy import EXACT, RENDERED, FlatteningPolicy, get_policy
from .point_path_decoder import PointPathDecoder, PointResolution
from .point_path_encoder import PointPathEncoder
from .sentence_matcher import SentenceMatcher, build_corpus

__all__ = [
    "EXACT",
    "RENDERED",
    "FlatteningPolicy",
    "PointPathDecoder",
    "PointPathEncoder",
    "PointResolution",
    "SentenceMatcher",
    "build_corpus",
    "get_policy",
]
