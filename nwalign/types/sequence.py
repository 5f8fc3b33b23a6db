"""Sequence types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Optional, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Sequence(Generic[T]):
    """Ordered, immutable run of symbols with an identifier and optional description.

    Symbols only need to support equality comparison.
    """

    residues: Tuple[T, ...]
    identifier: str = ""
    description: Optional[str] = None

    def __post_init__(self) -> None:
        # Freeze whatever iterable we were handed
        object.__setattr__(self, "residues", tuple(self.residues))

    @classmethod
    def from_string(
        cls,
        text: str,
        identifier: str = "",
        description: Optional[str] = None,
    ) -> "Sequence[str]":
        """Build a sequence of characters from raw text."""
        return cls(residues=tuple(text), identifier=identifier, description=description)

    def __len__(self) -> int:
        return len(self.residues)

    def __getitem__(self, index: int) -> T:
        return self.residues[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self.residues)

    def __str__(self) -> str:
        return "".join(str(residue) for residue in self.residues)


__all__ = ["Sequence"]
