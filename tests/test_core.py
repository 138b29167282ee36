# tests/test_core.py
import pytest

from oyster.core.alphabet import ALPHABET, index_of, indexes_of, symbol_at
from oyster.core.canon import canonical_json, parse_json
from oyster.core.errors import InvalidInputError, InvalidSymbolError
from oyster.core.types import CODECS, get_codec


def test_alphabet_is_64_distinct_symbols():
    assert len(ALPHABET) == 64
    assert len(set(ALPHABET)) == 64
    assert ALPHABET[:10] == "0123456789"
    assert ALPHABET[-2:] == "-_"


def test_alphabet_lookup_is_inverse():
    for i in range(64):
        assert index_of(symbol_at(i)) == i


def test_symbol_at_range():
    assert symbol_at(0) == "0"
    assert symbol_at(10) == "a"
    assert symbol_at(36) == "A"
    assert symbol_at(63) == "_"
    with pytest.raises(IndexError):
        symbol_at(64)
    with pytest.raises(IndexError):
        symbol_at(-1)


@pytest.mark.parametrize("bad", ["+", "/", "=", " ", "é", "ab", ""])
def test_index_of_rejects_unknown(bad):
    with pytest.raises(InvalidSymbolError):
        index_of(bad)


def test_indexes_of_reports_position():
    with pytest.raises(InvalidSymbolError) as exc:
        indexes_of("abc+def")
    assert exc.value.symbol == "+"
    assert exc.value.position == 3
    assert isinstance(exc.value, InvalidInputError)
    assert isinstance(exc.value, ValueError)


def test_canonical_json_sorting():
    messy = {
        "z": 1,
        "a": "hello",
        "nested": {"b": 2, "a": 1},
    }
    canon = canonical_json(messy).decode("utf-8")
    assert canon == '{"a":"hello","nested":{"a":1,"b":2},"z":1}'


def test_canonical_json_roundtrip():
    obj = {"id": "8XYa", "blob": "M_0f"}
    assert parse_json(canonical_json(obj)) == obj
    assert parse_json(canonical_json(obj).decode("utf-8")) == obj


@pytest.mark.parametrize("raw", ["{not json", b"{\"a\": ", b"\xff\xfe"])
def test_parse_json_errors_are_invalid_input(raw):
    with pytest.raises(InvalidInputError):
        parse_json(raw)


def test_codec_registry():
    assert set(CODECS) == {"btt64", "radix64", "radix256"}
    for name, codec in CODECS.items():
        assert codec.name == name
    assert get_codec("radix64").decode(get_codec("radix64").encode(2342666)) == 2342666
    with pytest.raises(ValueError):
        get_codec("base64")
