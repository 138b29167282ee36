# tests/test_btt64.py
import random

import pytest

from oyster.core.btt64 import (
    btt64_decode,
    btt64_decode_str,
    btt64_encode,
    btt64_encode_str,
    encoded_length,
)
from oyster.core.alphabet import ALPHABET
from oyster.core.errors import (
    InvalidInputError,
    InvalidSymbolError,
    InvalidUtf8Error,
    MalformedBlockError,
)


@pytest.fixture
def rng():
    return random.Random(20260131)


def test_empty():
    assert btt64_encode(b"") == ""
    assert btt64_decode("") == b""


def test_known_vectors():
    assert btt64_encode(b"\x00") == "00"
    assert btt64_encode(b"\xff") == "M_"
    assert btt64_encode(b"\xff\xff") == "Y__"
    assert btt64_encode(bytes([0xFF, 0x00, 0x0F])) == "M_0f"
    assert btt64_encode(b"\xff\xff\xff") == "____"


def test_full_block_scenario():
    data = bytes([0xFF, 0x00, 0x0F])
    assert btt64_decode(btt64_encode(data)) == data


def test_output_is_url_safe(rng):
    data = bytes(rng.randrange(256) for _ in range(300))
    encoded = btt64_encode(data)
    assert set(encoded) <= set(ALPHABET)
    assert "=" not in encoded


@pytest.mark.parametrize("n", range(0, 10))
def test_encoded_length(n):
    data = bytes(range(n))
    encoded = btt64_encode(data)
    assert len(encoded) == encoded_length(n)
    assert len(encoded) % 4 != 1


def test_random_roundtrip(rng):
    for _ in range(100):
        data = bytes(rng.randrange(256) for _ in range(rng.randrange(1000)))
        assert btt64_decode(btt64_encode(data)) == data


def test_accepts_bytes_like():
    assert btt64_encode(bytearray(b"abc")) == btt64_encode(b"abc")
    assert btt64_encode(memoryview(b"abc")) == btt64_encode(b"abc")


def test_string_roundtrip():
    s = "Hello world!"
    encoded = btt64_encode_str(s)
    assert encoded == btt64_encode(s.encode("utf-8"))
    assert btt64_decode_str(encoded) == s


def test_unicode_string_roundtrip():
    s = "Grüße, 世界 🦪"
    assert btt64_decode_str(btt64_encode_str(s)) == s


@pytest.mark.parametrize("text", ["0", "00000", "M_0f1", "a"])
def test_single_symbol_tail_rejected(text):
    with pytest.raises(MalformedBlockError):
        btt64_decode(text)


@pytest.mark.parametrize("text", ["M_0+", "M=", "M_0f M_", "äb"])
def test_invalid_symbol_rejected(text):
    with pytest.raises(InvalidSymbolError):
        btt64_decode(text)


@pytest.mark.parametrize("text", [
    "10",      # 2 symbols: only bits 0b110000 allowed in head
    "Y_",
    "100",     # 3 symbols: only bits 0b111100 allowed in head
    "3__",
    "____10",  # bad tail after a good block
])
def test_non_canonical_head_rejected(text):
    with pytest.raises(MalformedBlockError):
        btt64_decode(text)


def test_canonical_partial_heads_accepted():
    assert btt64_decode("g0") == b"\x40"
    assert btt64_decode("M_") == b"\xff"
    assert btt64_decode("Y__") == b"\xff\xff"


def test_decode_str_invalid_utf8():
    encoded = btt64_encode(b"\xff\xfe\xfd")
    assert btt64_decode(encoded) == b"\xff\xfe\xfd"
    with pytest.raises(InvalidUtf8Error):
        btt64_decode_str(encoded)


def test_errors_are_value_errors():
    for text in ("0", "10", "!!"):
        with pytest.raises(InvalidInputError):
            btt64_decode(text)
        with pytest.raises(ValueError):
            btt64_decode(text)


@pytest.mark.parametrize("bad", [3, 0, "abc"])
def test_encode_rejects_int_and_str(bad):
    with pytest.raises(TypeError):
        btt64_encode(bad)
