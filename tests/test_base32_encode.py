from __future__ import annotations

import base64
import random
from array import array

import pytest

from pybase32 import encode

RFC4648_VECTORS = [
    (b"f", b"MY======"),
    (b"fo", b"MZXQ===="),
    (b"foo", b"MZXW6==="),
    (b"foob", b"MZXW6YQ="),
    (b"fooba", b"MZXW6YTB"),
    (b"foobar", b"MZXW6YTBOI======"),
]


@pytest.mark.parametrize(("data", "text"), RFC4648_VECTORS)
def test_encode_rfc4648_vectors(data: bytes, text: bytes) -> None:
    assert encode(data) == text


def test_encode_known_vectors() -> None:
    assert encode(bytes(5)) == b"AAAAAAAA"
    assert encode(b"\xff") == b"74======"
    assert encode(b"\xff" * 5) == b"77777777"


def test_encode_empty_has_no_padding() -> None:
    assert encode(b"") == b""


@pytest.mark.parametrize(("size", "pad"), [(1, 6), (2, 4), (3, 3), (4, 1), (5, 0)])
def test_encode_tail_group_padding(size: int, pad: int) -> None:
    text = encode(bytes(range(size)))
    assert len(text) == 8
    assert text.endswith(b"=" * pad)
    assert b"=" not in text[: 8 - pad]


def test_encode_length_is_multiple_of_8() -> None:
    for n in range(1, 64):
        assert len(encode(bytes(n))) == 8 * -(-n // 5)


def test_encode_accepts_bytes_like() -> None:
    assert encode(bytearray(b"foobar")) == b"MZXW6YTBOI======"
    assert encode(memoryview(b"xfoobar")[1:]) == b"MZXW6YTBOI======"
    assert encode(array("B", b"foobar")) == b"MZXW6YTBOI======"


def test_encode_rejects_text() -> None:
    with pytest.raises(TypeError):
        encode("foo")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        encode(12345)  # type: ignore[arg-type]


def test_encode_matches_stdlib() -> None:
    rng = random.Random(4648)
    for _ in range(200):
        data = rng.randbytes(rng.randint(1, 80))
        assert encode(data) == base64.b32encode(data)
