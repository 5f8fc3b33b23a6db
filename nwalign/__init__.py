"""Global pairwise sequence alignment (Needleman-Wunsch, linear penalties)."""

from .algorithms import NeedlemanWunschAligner, align
from .errors import NWAlignError, SequenceCountError, SequenceFormatError
from .types import PairwiseAlignment, PenaltyParameters, Sequence

__version__ = "0.1.0"

__all__ = [
    "NeedlemanWunschAligner",
    "align",
    "PairwiseAlignment",
    "PenaltyParameters",
    "Sequence",
    "NWAlignError",
    "SequenceCountError",
    "SequenceFormatError",
]
