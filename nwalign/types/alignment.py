"""Alignment types."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")

GAP_GLYPH = "-"
AlignedPair = Tuple[Optional[T], Optional[T]]


@dataclass(frozen=True)
class PairwiseAlignment(Generic[T]):
    """Global alignment of two sequences.

    Attributes:
        pairs: Columns from the start to the end of both sequences. Each column
            holds a symbol from sequence 0 and a symbol from sequence 1; one
            side is None for a gap, never both.
        score: The optimal alignment score under the penalties used to build it.
    """

    pairs: Tuple[AlignedPair, ...]
    score: float

    def __post_init__(self) -> None:
        pairs = tuple(tuple(pair) for pair in self.pairs)
        for index, pair in enumerate(pairs):
            if len(pair) != 2:
                raise ValueError(f"Column {index} must hold exactly two entries.")
            if pair[0] is None and pair[1] is None:
                raise ValueError(f"Column {index} has a gap on both sides.")
        object.__setattr__(self, "pairs", pairs)
        object.__setattr__(self, "score", float(self.score))

    def __len__(self) -> int:
        return len(self.pairs)

    @property
    def matches(self) -> int:
        """Number of columns where both symbols are present and equal."""
        return sum(1 for a, b in self.pairs if a is not None and a == b)

    @property
    def mismatches(self) -> int:
        """Number of columns where both symbols are present but differ."""
        return sum(
            1 for a, b in self.pairs if a is not None and b is not None and a != b
        )

    @property
    def gaps(self) -> int:
        """Number of columns with a gap on one side."""
        return sum(1 for a, b in self.pairs if a is None or b is None)

    def matching_ratio(self) -> float:
        """Matching columns divided by alignment length including gaps."""
        return self.matches / len(self.pairs) if self.pairs else 0.0

    def projection(self, side: int) -> List[T]:
        """Non-gap symbols of one side, in order; reproduces that input sequence."""
        if side not in (0, 1):
            raise ValueError(f"side must be 0 or 1, got {side}")
        return [pair[side] for pair in self.pairs if pair[side] is not None]

    def aligned_rows(self, gap: str = GAP_GLYPH) -> Tuple[str, str]:
        """Render both sides as text rows, drawing absent symbols with `gap`."""
        rows = tuple(
            "".join(gap if pair[side] is None else str(pair[side]) for pair in self.pairs)
            for side in (0, 1)
        )
        return rows[0], rows[1]

    def format(self, gap: str = GAP_GLYPH) -> str:
        """Summary line followed by one row per input sequence."""
        top, bottom = self.aligned_rows(gap)
        return (
            f"Alignment with score {self.score:.2f}, "
            f"{100.0 * self.matching_ratio():.2f}% aligned\n"
            f"{top}\n"
            f"{bottom}"
        )

    def __str__(self) -> str:
        return self.format()

    def to_dict(self) -> Dict[str, Any]:
        """Plain mapping suitable for JSON; gaps become None."""
        return {
            "alignment": [[a, b] for a, b in self.pairs],
            "score": self.score,
        }

    def to_json(self, **kwargs: Any) -> str:
        return json.dumps(self.to_dict(), **kwargs)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PairwiseAlignment":
        if not isinstance(data, dict):
            raise ValueError(
                f"Alignment record must be a mapping, got {type(data).__name__}"
            )
        try:
            pairs = data["alignment"]
            score = data["score"]
        except KeyError as exc:
            raise ValueError(f"Alignment record is missing {exc.args[0]!r}") from exc
        if not isinstance(pairs, (list, tuple)):
            raise ValueError("'alignment' must be a list of columns")
        for index, pair in enumerate(pairs):
            if not isinstance(pair, (list, tuple)):
                raise ValueError(f"Column {index} must be a list, got {pair!r}")
        try:
            score = float(score)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"'score' must be a number, got {score!r}") from exc
        return cls(pairs=tuple(tuple(pair) for pair in pairs), score=score)

    @classmethod
    def from_json(cls, text: str) -> "PairwiseAlignment":
        return cls.from_dict(json.loads(text))


__all__ = ["PairwiseAlignment", "AlignedPair", "GAP_GLYPH"]
