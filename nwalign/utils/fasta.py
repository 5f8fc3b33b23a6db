"""Functions for working with FASTA files."""

import io
import os
from typing import IO, List, Tuple, Union

import skbio
import skbio.io

from nwalign.errors import SequenceCountError, SequenceFormatError
from nwalign.types import Sequence

PAIRWISE_COUNT = 2
HEADER_MARKER = ">"
FastaSource = Union[str, "os.PathLike[str]", IO[str]]


def sequence_from_skbio(record: skbio.Sequence) -> Sequence[str]:
    """Convert a scikit-bio record to a Sequence of characters."""
    metadata = getattr(record, "metadata", {}) or {}
    return Sequence.from_string(
        str(record),
        identifier=metadata.get("id") or "",
        description=metadata.get("description") or None,
    )


def _header_only_sequence(header: str) -> Sequence[str]:
    """Empty Sequence for a record whose header has no data lines."""
    parts = header[len(HEADER_MARKER) :].strip().split(None, 1)
    return Sequence.from_string(
        "",
        identifier=parts[0] if parts else "",
        description=parts[1] if len(parts) > 1 else None,
    )


def _split_records(text: str) -> List[Tuple[str, List[str]]]:
    """Group non-blank lines into (header, data lines) records.

    Blank lines are dropped. Data before the first header raises
    SequenceFormatError.
    """
    records: List[Tuple[str, List[str]]] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        if line.startswith(HEADER_MARKER):
            records.append((line, []))
        elif records:
            records[-1][1].append(line)
        else:
            raise SequenceFormatError(f"Sequence data before any header: {line!r}")
    return records


def read_fasta(source: FastaSource) -> List[Sequence[str]]:
    """Read every record of a FASTA file or handle.

    Blank lines are ignored and a header with no data yields an empty
    Sequence. Symbol data before the first header raises SequenceFormatError,
    as does anything scikit-bio cannot decode (e.g. non-ASCII symbols).
    Missing or unreadable files raise the underlying OSError.
    """
    if isinstance(source, (str, os.PathLike)):
        with open(source, "r", encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = source.read()

    records = _split_records(text)
    with_data = [(header, lines) for header, lines in records if lines]

    decoded: List[Sequence[str]] = []
    if with_data:
        normalized = "".join(
            header + "\n" + "".join(line + "\n" for line in lines)
            for header, lines in with_data
        )
        try:
            decoded = [
                sequence_from_skbio(record)
                for record in skbio.io.read(io.StringIO(normalized), format="fasta")
            ]
        except (skbio.io.FASTAFormatError, ValueError) as exc:
            raise SequenceFormatError(str(exc)) from exc

    remaining = iter(decoded)
    return [
        next(remaining) if lines else _header_only_sequence(header)
        for header, lines in records
    ]


def read_sequence_pair(source: FastaSource) -> List[Sequence[str]]:
    """Read a FASTA input that must hold exactly two records."""
    sequences = read_fasta(source)
    if len(sequences) != PAIRWISE_COUNT:
        raise SequenceCountError(PAIRWISE_COUNT, len(sequences))
    return sequences


__all__ = ["read_fasta", "read_sequence_pair", "sequence_from_skbio"]
