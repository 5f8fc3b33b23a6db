"""Errors raised at the input boundary (decoding and file handling)."""


class NWAlignError(Exception):
    """Base class for errors raised by nwalign."""


class SequenceFormatError(NWAlignError, ValueError):
    """Raw sequence input is malformed, e.g. symbol data before any header."""


class SequenceCountError(NWAlignError, ValueError):
    """An input did not decode to the expected number of records."""

    def __init__(self, expected: int, found: int):
        super().__init__(f"Expecting exactly {expected} sequences, found {found}.")
        self.expected = expected
        self.found = found


__all__ = ["NWAlignError", "SequenceFormatError", "SequenceCountError"]
