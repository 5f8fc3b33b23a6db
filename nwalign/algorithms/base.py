"""Shared interfaces for pairwise alignment algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence as SymbolSequence, TypeVar

from nwalign.types import PairwiseAlignment

T = TypeVar("T")


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    @abstractmethod
    def align(
        self,
        x_seq: SymbolSequence[T],
        y_seq: SymbolSequence[T],
    ) -> PairwiseAlignment[T]:
        """Align two sequences."""
        raise NotImplementedError


__all__ = ["PairwiseAligner"]
