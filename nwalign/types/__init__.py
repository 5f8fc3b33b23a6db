"""Types for the project."""

from .sequence import Sequence
from .alignment import PairwiseAlignment, AlignedPair, GAP_GLYPH
from .parameters import PenaltyParameters


__all__ = [
    "Sequence",
    "PairwiseAlignment",
    "AlignedPair",
    "GAP_GLYPH",
    "PenaltyParameters",
    "parameters",
]
