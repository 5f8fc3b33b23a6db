"""Utility functions for the project."""

from .fasta import read_fasta, read_sequence_pair
from .serialization import (
    parameters_to_dict,
    save_parameters,
    load_parameters,
    write_alignment,
    read_alignment,
)

__all__ = [
    "read_fasta",
    "read_sequence_pair",
    "parameters_to_dict",
    "save_parameters",
    "load_parameters",
    "write_alignment",
    "read_alignment",
]
