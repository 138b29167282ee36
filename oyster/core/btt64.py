# oyster/core/btt64.py
"""
Binary-to-text encoding over the oyster alphabet.

Every 3 input bytes become 4 symbols. The first symbol of a group collects the
top two bits of each byte (byte 0 most significant); the remaining symbols carry
the low six bits of byte 0, 1 and 2. A trailing group of 1 or 2 bytes is written
as 2 or 3 symbols. There is no padding character.
"""

from oyster.core.alphabet import ALPHABET, indexes_of
from oyster.core.errors import InvalidUtf8Error, MalformedBlockError

# Allowed bits in the head symbol of a block, keyed by block length in symbols
_HEAD_MASK = {2: 0b00110000, 3: 0b00111100, 4: 0b00111111}


def encoded_length(byte_count: int) -> int:
    full, rest = divmod(byte_count, 3)
    return full * 4 + (rest + 1 if rest else 0)


def btt64_encode(data: bytes) -> str:
    """Encode bytes to btt64 text. Total over all byte sequences."""
    if isinstance(data, (int, str)):
        raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")
    data = bytes(data)
    out = [""] * encoded_length(len(data))
    pos = 0
    for offset in range(0, len(data), 3):
        block = data[offset:offset + 3]
        head = 0
        for i, b in enumerate(block):
            head |= (b & 0b11000000) >> ((i + 1) * 2)
        out[pos] = ALPHABET[head]
        for i, b in enumerate(block, start=1):
            out[pos + i] = ALPHABET[b & 0b00111111]
        pos += len(block) + 1
    return "".join(out)


def _decode_block(idx: list, out: bytearray, offset: int) -> None:
    head = idx[0]
    if head & _HEAD_MASK[len(idx)] != head:
        raise MalformedBlockError(
            f"Non-canonical block at symbol {offset}: head bits outside mask"
        )
    for i in range(len(idx) - 1):
        out.append(((head << ((i + 1) * 2)) & 0b11000000) | idx[i + 1])


def btt64_decode(text: str) -> bytes:
    """
    Decode btt64 text back to bytes.
    Raises InvalidSymbolError or MalformedBlockError; never returns partial output.
    """
    if len(text) % 4 == 1:
        raise MalformedBlockError(
            f"Trailing block of a single symbol at position {len(text) - 1}"
        )
    idx = indexes_of(text)
    out = bytearray()
    for offset in range(0, len(idx), 4):
        _decode_block(idx[offset:offset + 4], out, offset)
    return bytes(out)


def btt64_encode_str(text: str) -> str:
    """Same as btt64_encode, for a string (UTF-8)."""
    return btt64_encode(text.encode("utf-8"))


def btt64_decode_str(text: str) -> str:
    """Decode btt64 text whose payload is UTF-8 text."""
    raw = btt64_decode(text)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error(f"Decoded bytes are not valid UTF-8: {e.reason}") from e
