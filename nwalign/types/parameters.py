"""
This module defines the scoring parameters of the global aligner: a per-column
mismatch penalty and a per-position gap penalty. Both are plain floats with no
sign constraint, so positive values act as rewards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

DEFAULT_MISMATCH_PENALTY = -2.0
DEFAULT_GAP_PENALTY = -1.0
PENALTY_KEYS: Tuple[str, str] = ("mismatch_penalty", "gap_penalty")


def _validate_keys(
    data: Dict[str, object], expected: Sequence[str], context: str
) -> None:
    unexpected = [k for k in data if k not in expected]
    if unexpected:
        raise ValueError(f"{context} has unexpected keys: {unexpected}")


def _as_float(value: object, name: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


@dataclass(frozen=True)
class PenaltyParameters:
    """Mismatch and gap penalties for linear-gap global alignment."""

    mismatch_penalty: float = DEFAULT_MISMATCH_PENALTY
    gap_penalty: float = DEFAULT_GAP_PENALTY

    def __post_init__(self) -> None:
        for name in PENALTY_KEYS:
            object.__setattr__(self, name, _as_float(getattr(self, name), name))

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "PenaltyParameters":
        """Build parameters from a mapping; missing keys fall back to defaults."""
        _validate_keys(data, PENALTY_KEYS, "penalty parameters")
        return cls(**data)  # type: ignore[arg-type]


__all__ = [
    "PenaltyParameters",
    "DEFAULT_MISMATCH_PENALTY",
    "DEFAULT_GAP_PENALTY",
    "PENALTY_KEYS",
]
