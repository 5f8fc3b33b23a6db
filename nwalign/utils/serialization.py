"""Serialization utilities for penalty parameters and alignment records."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from nwalign.types import PairwiseAlignment, PenaltyParameters

PathLike = Union[str, Path]


def parameters_to_dict(
    params: PenaltyParameters, float_precision: int | None = 6
) -> Dict[str, Any]:
    """
    Convert PenaltyParameters into a plain dictionary suitable for YAML.
    """
    values = asdict(params)
    if float_precision is None:
        return values
    return {key: round(value, float_precision) for key, value in values.items()}


def save_parameters(params: PenaltyParameters, yaml_path: PathLike) -> None:
    """Write penalty parameters to a YAML file under a `parameters` key."""
    payload = {"parameters": parameters_to_dict(params)}
    with Path(yaml_path).open("w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle, sort_keys=False)


def load_parameters(yaml_path: PathLike) -> PenaltyParameters:
    """Load penalty parameters from a YAML file.

    Keys may sit at the top level or under `parameters`; missing keys keep
    their defaults.
    """
    with Path(yaml_path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}

    if not isinstance(payload, dict):
        raise ValueError(f"{yaml_path}: expected a mapping of penalty parameters")
    params_dict = payload.get("parameters", payload)
    if not isinstance(params_dict, dict):
        raise ValueError(f"{yaml_path}: 'parameters' must be a mapping")
    return PenaltyParameters.from_dict(params_dict)


def write_alignment(alignment: PairwiseAlignment, path: PathLike) -> None:
    """Persist an alignment record as JSON."""
    Path(path).write_text(alignment.to_json(), encoding="utf-8")


def read_alignment(path: PathLike) -> PairwiseAlignment:
    """Load an alignment record written by write_alignment."""
    return PairwiseAlignment.from_json(Path(path).read_text(encoding="utf-8"))


__all__ = [
    "parameters_to_dict",
    "save_parameters",
    "load_parameters",
    "write_alignment",
    "read_alignment",
]
