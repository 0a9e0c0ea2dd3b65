"""
pybase32: RFC 4648 base32 encoding and decoding.

`encode` turns any byte string into upper-case, `=`-padded base32 text and
`decode` turns it back, returning None when the text is malformed.
"""

from __future__ import annotations

from .alphabet import ALPHABET, PAD
from .decoder import decode, decode_or_raise
from .encoder import encode
from .exceptions import (
    Base32Error,
    DecodeError,
    IncompleteTrailingGroupError,
    InvalidLengthError,
    InvalidSymbolError,
)

__all__ = [
    "ALPHABET",
    "PAD",
    "Base32Error",
    "DecodeError",
    "IncompleteTrailingGroupError",
    "InvalidLengthError",
    "InvalidSymbolError",
    "decode",
    "decode_or_raise",
    "encode",
]

__version__ = "0.1.0"
