from __future__ import annotations

import logging
from collections.abc import Sequence

from .alphabet import INV_ALPHABET, INVALID, PADDING
from .encoder import GROUP_SYMBOLS, _check_bytes_like
from .exceptions import (
    DecodeError,
    IncompleteTrailingGroupError,
    InvalidLengthError,
    InvalidSymbolError,
)

log = logging.getLogger(__name__)


def _to_symbols(data: object) -> Sequence[int]:
    # Text is scanned as code points; anything past 0xff is never a symbol.
    if isinstance(data, str):
        return [ord(ch) for ch in data]
    try:
        return _check_bytes_like(data)
    except TypeError:
        raise TypeError(f"expected bytes or str, got {type(data).__name__}") from None


def _unpack(data: Sequence[int]) -> bytes:
    # Bytes after the first padding symbol are not looked at.
    out = bytearray()
    acc = 0
    pending = 0
    for position, symbol in enumerate(data):
        value = INV_ALPHABET[symbol] if symbol < len(INV_ALPHABET) else INVALID
        if value == PADDING:
            return bytes(out)
        if value == INVALID:
            raise InvalidSymbolError(position=position, symbol=symbol)

        acc = (acc << 5) | value
        pending += 5
        while pending >= 8:
            pending -= 8
            out.append(acc >> pending)
            acc &= (1 << pending) - 1

    if pending:
        raise IncompleteTrailingGroupError(pending)
    return bytes(out)


def decode_or_raise(data: bytes | str) -> bytes:
    """
    Decode base32 text, raising a `DecodeError` subclass on malformed input.

    The input length must be a non-zero multiple of 8. Decoding stops at the
    first `=`; whatever follows it is not validated.
    """

    raw = _to_symbols(data)
    if not raw or len(raw) % GROUP_SYMBOLS:
        raise InvalidLengthError(len(raw))
    return _unpack(raw)


def decode(data: bytes | str) -> bytes | None:
    """Decode base32 text. Returns None on any malformed input."""

    try:
        return decode_or_raise(data)
    except DecodeError as e:
        log.debug("rejecting base32 input: %s", e)
        return None
