"""Needleman-Wunsch global alignment with linear mismatch and gap penalties."""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Deque, Optional, Sequence as SymbolSequence, Tuple, TypeVar

import numpy as np

from nwalign.algorithms.base import PairwiseAligner
from nwalign.types import AlignedPair, PairwiseAlignment, PenaltyParameters

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Backpointer codes stored in the choice matrix
MATCH = 0
DELETE = 1
INSERT = 2


class NeedlemanWunschAligner(PairwiseAligner):
    """Optimal global alignment scored with a mismatch and a gap penalty.

    Matching symbols score 0. Among equally scored moves the diagonal
    (match/mismatch) wins over a deletion, which wins over an insertion, so
    repeated calls on the same input always trace the same path.
    """

    def __init__(self, parameters: Optional[PenaltyParameters] = None):
        self.parameters = parameters if parameters is not None else PenaltyParameters()

    def _initialize_matrices(self, n: int, m: int) -> Tuple[np.ndarray, np.ndarray]:
        """Allocate score and choice tables and fill the gap-only edges."""
        gap = self.parameters.gap_penalty
        scores = np.empty((n + 1, m + 1), dtype=np.float64)
        choices = np.empty((n + 1, m + 1), dtype=np.int8)

        scores[:, 0] = np.arange(n + 1, dtype=np.float64) * gap
        scores[0, :] = np.arange(m + 1, dtype=np.float64) * gap
        # 0 * negative gap would leave -0.0 in the origin
        scores[0, 0] = 0.0
        choices[:, 0] = DELETE
        choices[0, :] = INSERT
        choices[0, 0] = MATCH
        return scores, choices

    def _fill_interior(
        self,
        scores: np.ndarray,
        choices: np.ndarray,
        x: Tuple[T, ...],
        y: Tuple[T, ...],
    ) -> None:
        """Row-major recurrence over cells (1..n, 1..m)."""
        mismatch = self.parameters.mismatch_penalty
        gap = self.parameters.gap_penalty

        m = len(y)
        prev_row = scores[0].tolist()
        for i in range(1, len(x) + 1):
            row = [scores[i, 0].item()] + [0.0] * m
            choice_row = [MATCH] * (m + 1)
            x_sym = x[i - 1]
            left = row[0]
            for j in range(1, m + 1):
                best = prev_row[j - 1] + (0.0 if x_sym == y[j - 1] else mismatch)
                kind = MATCH

                # Later candidates must be strictly better to win a tie
                delete = prev_row[j] + gap
                if delete > best:
                    best, kind = delete, DELETE
                insert = left + gap
                if insert > best:
                    best, kind = insert, INSERT

                row[j] = best
                choice_row[j] = kind
                left = best

            scores[i, 1:] = row[1:]
            choices[i, 1:] = choice_row[1:]
            prev_row = row

    def _traceback(
        self,
        choices: np.ndarray,
        x: Tuple[T, ...],
        y: Tuple[T, ...],
    ) -> Deque[AlignedPair]:
        """Walk backpointers from (n, m) to an edge, then pad out the remainder."""
        i, j = len(x), len(y)
        pairs: Deque[AlignedPair] = deque()

        while i > 0 and j > 0:
            kind = choices[i, j]
            if kind == MATCH:
                pairs.appendleft((x[i - 1], y[j - 1]))
                i -= 1
                j -= 1
            elif kind == DELETE:
                pairs.appendleft((x[i - 1], None))
                i -= 1
            else:
                pairs.appendleft((None, y[j - 1]))
                j -= 1

        while i > 0:
            pairs.appendleft((x[i - 1], None))
            i -= 1
        while j > 0:
            pairs.appendleft((None, y[j - 1]))
            j -= 1
        return pairs

    def score_matrix(
        self, x_seq: SymbolSequence[T], y_seq: SymbolSequence[T]
    ) -> np.ndarray:
        """Return the filled (n+1) x (m+1) score matrix."""
        x, y = tuple(x_seq), tuple(y_seq)
        scores, choices = self._initialize_matrices(len(x), len(y))
        self._fill_interior(scores, choices, x, y)
        return scores

    def align(
        self,
        x_seq: SymbolSequence[T],
        y_seq: SymbolSequence[T],
    ) -> PairwiseAlignment[T]:
        """Compute the optimal global alignment of two sequences."""
        start = time.perf_counter()
        x, y = tuple(x_seq), tuple(y_seq)
        n, m = len(x), len(y)

        scores, choices = self._initialize_matrices(n, m)
        self._fill_interior(scores, choices, x, y)
        pairs = self._traceback(choices, x, y)
        score = float(scores[n, m])

        logger.debug(
            "Aligned %d x %d symbols, score %.2f in %.6fs",
            n,
            m,
            score,
            time.perf_counter() - start,
        )
        return PairwiseAlignment(pairs=tuple(pairs), score=score)


def align(
    x_seq: SymbolSequence[T],
    y_seq: SymbolSequence[T],
    parameters: Optional[PenaltyParameters] = None,
) -> PairwiseAlignment[T]:
    """Align two sequences with a one-off NeedlemanWunschAligner."""
    return NeedlemanWunschAligner(parameters).align(x_seq, y_seq)


__all__ = ["NeedlemanWunschAligner", "align", "MATCH", "DELETE", "INSERT"]
