from __future__ import annotations

from .alphabet import ALPHABET, PAD

GROUP_BYTES = 5
GROUP_SYMBOLS = 8


def _check_bytes_like(data: object) -> memoryview:
    if isinstance(data, str):
        raise TypeError("expected a bytes-like object, got str")
    try:
        return memoryview(data).cast("B")  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}") from None


def encode(data: bytes) -> bytes:
    """
    Encode `data` as RFC 4648 base32 text (`A-Z2-7`, `=` padded).

    Every 5 input bytes become 8 symbols. A trailing group of 1-4 bytes is
    zero-filled up to the next multiple of 5 bits, giving 2, 4, 5 or 7 symbols,
    and the output is then padded with `=` to a multiple of 8. Empty input
    encodes to `b""` with no padding.
    """

    view = _check_bytes_like(data)
    if not view:
        return b""

    out = bytearray()
    for start in range(0, len(view), GROUP_BYTES):
        chunk = view[start : start + GROUP_BYTES]
        bits = len(chunk) * 8
        symbols = -(-bits // 5)
        acc = int.from_bytes(chunk, "big") << (symbols * 5 - bits)
        for shift in range((symbols - 1) * 5, -1, -5):
            out.append(ALPHABET[(acc >> shift) & 31])

    out += PAD * (-len(out) % GROUP_SYMBOLS)
    return bytes(out)
