"""Algorithms for the project."""

from .base import PairwiseAligner
from .needleman_wunsch import NeedlemanWunschAligner, align


__all__ = [
    "PairwiseAligner",
    "NeedlemanWunschAligner",
    "align",
    "needleman_wunsch",
]
