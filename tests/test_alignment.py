"""Unit tests for the PairwiseAlignment record."""

from __future__ import annotations

import json

import pytest

from nwalign.types import PairwiseAlignment


def _build_alignment() -> PairwiseAlignment:
    """GAT- over GC-T: one match, one mismatch, two gap columns."""
    return PairwiseAlignment(
        pairs=(("G", "G"), ("A", "C"), ("T", None), (None, "T")),
        score=-5.0,
    )


def test_statistics():
    alignment = _build_alignment()

    assert len(alignment) == 4
    assert alignment.matches == 1
    assert alignment.mismatches == 1
    assert alignment.gaps == 2
    assert alignment.matching_ratio() == pytest.approx(0.25)


def test_empty_alignment_ratio_is_zero():
    alignment = PairwiseAlignment(pairs=(), score=0.0)

    assert alignment.matching_ratio() == 0.0
    assert str(alignment) == "Alignment with score 0.00, 0.00% aligned\n\n"


def test_projection_drops_gaps():
    alignment = _build_alignment()

    assert alignment.projection(0) == ["G", "A", "T"]
    assert alignment.projection(1) == ["G", "C", "T"]
    with pytest.raises(ValueError):
        alignment.projection(2)


def test_format_renders_summary_and_rows():
    alignment = _build_alignment()

    assert str(alignment) == (
        "Alignment with score -5.00, 25.00% aligned\n" "GAT-\n" "GC-T"
    )


def test_format_with_custom_gap_glyph():
    alignment = _build_alignment()

    assert alignment.aligned_rows(gap=".") == ("GAT.", "GC.T")
    assert alignment.format(gap="_").splitlines()[1:] == ["GAT_", "GC_T"]


def test_rejects_double_gap_column():
    with pytest.raises(ValueError):
        PairwiseAlignment(pairs=(("A", "A"), (None, None)), score=0.0)


def test_rejects_malformed_column():
    with pytest.raises(ValueError):
        PairwiseAlignment(pairs=(("A",),), score=0.0)


def test_record_is_frozen():
    alignment = _build_alignment()

    with pytest.raises((TypeError, AttributeError)):
        alignment.score = 1.0


def test_to_dict_uses_null_for_gaps():
    payload = json.loads(_build_alignment().to_json())

    assert payload == {
        "alignment": [["G", "G"], ["A", "C"], ["T", None], [None, "T"]],
        "score": -5.0,
    }


def test_json_round_trip():
    alignment = _build_alignment()

    assert PairwiseAlignment.from_json(alignment.to_json()) == alignment


def test_from_dict_requires_both_fields():
    with pytest.raises(ValueError):
        PairwiseAlignment.from_dict({"alignment": []})


@pytest.mark.parametrize(
    "payload",
    [
        [["A", "A"]],
        {"alignment": ["AC"], "score": 0.0},
        {"alignment": "AC", "score": 0.0},
        {"alignment": [["A", "A"]], "score": "high"},
    ],
)
def test_from_dict_rejects_malformed_payloads(payload):
    with pytest.raises(ValueError):
        PairwiseAlignment.from_dict(payload)
