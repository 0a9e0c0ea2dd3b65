from __future__ import annotations

ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PAD = b"="

# Markers stored in INV_ALPHABET for bytes that are not alphabet symbols.
INVALID = -1
PADDING = -2


def _build_inverse(alphabet: bytes, pad: bytes) -> tuple[int, ...]:
    if len(alphabet) != 32 or len(set(alphabet)) != 32:
        raise ValueError("alphabet must hold 32 distinct symbols")
    if pad[0] in alphabet:
        raise ValueError("padding byte must not be an alphabet symbol")

    table = [INVALID] * 256
    for value, symbol in enumerate(alphabet):
        table[symbol] = value
    table[pad[0]] = PADDING
    return tuple(table)


# byte value -> 5-bit value, INVALID or PADDING
INV_ALPHABET = _build_inverse(ALPHABET, PAD)
