"""Tests for repeated alignment runs."""

from __future__ import annotations

import pytest

from nwalign.algorithms import NeedlemanWunschAligner
from nwalign.runs import RunReport, run_repeated
from nwalign.types import PairwiseAlignment, PenaltyParameters


def test_single_run_returns_the_alignment():
    aligner = NeedlemanWunschAligner()
    report = run_repeated(aligner, "GATTACA", "GCATGCU")

    assert report.runs == 1
    assert report.alignment == aligner.align("GATTACA", "GCATGCU")
    assert report.elapsed >= 0.0


def test_parallel_runs_agree_with_a_direct_call():
    aligner = NeedlemanWunschAligner(PenaltyParameters(-1.0, -1.0))
    report = run_repeated(aligner, "GATTACA", "GCATGCU", runs=3, workers=2)

    assert report.runs == 3
    assert report.alignment == aligner.align("GATTACA", "GCATGCU")


def test_runs_must_be_positive():
    with pytest.raises(ValueError):
        run_repeated(NeedlemanWunschAligner(), "A", "A", runs=0)


def test_report_summary():
    report = RunReport(
        alignment=PairwiseAlignment(pairs=(), score=0.0), runs=4, elapsed=2.0
    )

    assert report.runs_per_second == 2.0
    assert report.summary() == "Performed 4 run(s) in 2.000s (2 runs/s)"
