"""Tests for parameter and alignment serialization."""

from __future__ import annotations

import pytest
import yaml

from nwalign.types import PairwiseAlignment, PenaltyParameters
from nwalign.utils import (
    load_parameters,
    parameters_to_dict,
    read_alignment,
    save_parameters,
    write_alignment,
)


def test_parameters_to_dict_rounds_floats():
    params = PenaltyParameters(mismatch_penalty=-1.23456789, gap_penalty=-1.0)

    assert parameters_to_dict(params) == {
        "mismatch_penalty": -1.234568,
        "gap_penalty": -1.0,
    }
    assert parameters_to_dict(params, float_precision=None)["mismatch_penalty"] == (
        -1.23456789
    )


def test_parameters_yaml_round_trip(tmp_path):
    path = tmp_path / "penalties.yaml"
    params = PenaltyParameters(mismatch_penalty=-3.0, gap_penalty=-0.5)

    save_parameters(params, path)

    assert yaml.safe_load(path.read_text())["parameters"]["gap_penalty"] == -0.5
    assert load_parameters(path) == params


def test_load_parameters_accepts_top_level_keys(tmp_path):
    path = tmp_path / "penalties.yaml"
    path.write_text("gap_penalty: -2\n")

    assert load_parameters(path) == PenaltyParameters(-2.0, -2.0)


def test_load_parameters_empty_file_keeps_defaults(tmp_path):
    path = tmp_path / "penalties.yaml"
    path.write_text("")

    assert load_parameters(path) == PenaltyParameters()


@pytest.mark.parametrize(
    "content",
    [
        "parameters:\n  gap_extend: -1\n",
        "- -1.0\n- -2.0\n",
        "parameters: 3\n",
    ],
)
def test_load_parameters_rejects_bad_payloads(tmp_path, content):
    path = tmp_path / "penalties.yaml"
    path.write_text(content)

    with pytest.raises(ValueError):
        load_parameters(path)


def test_alignment_file_round_trip(tmp_path):
    path = tmp_path / "alignment.json"
    alignment = PairwiseAlignment(
        pairs=(("A", "A"), (None, "C"), ("G", "T")), score=-3.0
    )

    write_alignment(alignment, path)

    assert read_alignment(path) == alignment
