"""Repeated alignment runs for throughput measurement."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence as SymbolSequence

from nwalign.algorithms import NeedlemanWunschAligner
from nwalign.types import PairwiseAlignment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunReport:
    """Outcome of a batch of identical, independent alignment runs."""

    alignment: PairwiseAlignment
    runs: int
    elapsed: float

    @property
    def runs_per_second(self) -> float:
        return self.runs / self.elapsed if self.elapsed > 0 else float("inf")

    def summary(self) -> str:
        return (
            f"Performed {self.runs} run(s) in {self.elapsed:.3f}s "
            f"({self.runs_per_second:.0f} runs/s)"
        )


def _align_once(
    aligner: NeedlemanWunschAligner, x_seq: SymbolSequence, y_seq: SymbolSequence
) -> PairwiseAlignment:
    return aligner.align(x_seq, y_seq)


def run_repeated(
    aligner: NeedlemanWunschAligner,
    x_seq: SymbolSequence,
    y_seq: SymbolSequence,
    runs: int = 1,
    workers: Optional[int] = None,
) -> RunReport:
    """Align the same pair `runs` times, in parallel worker processes when runs > 1.

    Runs share nothing, so the first result stands for all of them.
    """
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}")

    start = time.perf_counter()
    if runs == 1:
        results: List[PairwiseAlignment] = [_align_once(aligner, x_seq, y_seq)]
    else:
        with ProcessPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(_align_once, aligner, x_seq, y_seq) for _ in range(runs)
            ]
            results = [future.result() for future in futures]
    elapsed = time.perf_counter() - start

    report = RunReport(alignment=results[0], runs=runs, elapsed=elapsed)
    logger.info(report.summary())
    return report


__all__ = ["RunReport", "run_repeated"]
