"""Common value objects shared across the domain."""

from .point_path import PointPath, PointPathDict, SelectionPath, SelectionPathDict
from .sentence_match import SentenceMatch

__all__ = [
    "PointPath",
    "PointPathDict",
    "SelectionPath",
    "SelectionPathDict",
    "SentenceMatch",
]
