from __future__ import annotations


class Base32Error(Exception):
    """Base error for the pybase32 library."""


class DecodeError(Base32Error):
    """Base32 text could not be decoded."""


class InvalidLengthError(DecodeError):
    """Input length is not a positive multiple of 8."""

    def __init__(self, length: int) -> None:
        super().__init__(f"invalid base32 length: {length}")
        self.length = length


class InvalidSymbolError(DecodeError):
    """
    A byte outside the alphabet was found before any padding.

    `symbol` is the offending byte value and `position` its index in the input.
    """

    def __init__(self, *, position: int, symbol: int) -> None:
        super().__init__(f"invalid base32 symbol {symbol:#04x} at offset {position}")
        self.position = position
        self.symbol = symbol


class IncompleteTrailingGroupError(DecodeError):
    """Input ended with leftover bits that do not make up a full byte."""

    def __init__(self, bits: int) -> None:
        super().__init__(f"incomplete trailing group ({bits} bits left over)")
        self.bits = bits
