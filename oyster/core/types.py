# oyster/core/types.py
from dataclasses import dataclass
from typing import Callable, Dict, Literal

from oyster.core.btt64 import btt64_decode, btt64_encode
from oyster.core.radix64 import radix64_decode, radix64_encode
from oyster.core.radix256 import radix256_decode, radix256_encode


@dataclass(frozen=True)
class Codec:
    """A named, invertible value <-> representation pair."""
    name: str
    value_kind: Literal["bytes", "int"]
    encoded_kind: Literal["text", "bytes"]
    encode: Callable
    decode: Callable
    description: str = ""


CODECS: Dict[str, Codec] = {
    c.name: c
    for c in (
        Codec("btt64", "bytes", "text", btt64_encode, btt64_decode,
              "bytes <-> URL-safe text, 3 bytes per 4 symbols"),
        Codec("radix64", "int", "text", radix64_encode, radix64_decode,
              "unsigned integer <-> base-64 digits, most significant first"),
        Codec("radix256", "int", "bytes", radix256_encode, radix256_decode,
              "unsigned integer <-> big-endian base-256 bytes"),
    )
}


def get_codec(name: str) -> Codec:
    try:
        return CODECS[name]
    except KeyError:
        raise ValueError(f"Unknown codec: {name} (choose from {', '.join(CODECS)})") from None
