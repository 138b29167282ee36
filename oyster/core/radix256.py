# oyster/core/radix256.py
"""
Base-256 positional numeral system.

An unsigned integer becomes its big-endian base-256 digits: plain byte values,
not alphabet symbols, so the output is not printable.
"""

from typing import Iterable, Union

from oyster.core.errors import InvalidInputError
from oyster.core.radix64 import check_unsigned


def radix256_encode(n: int) -> bytes:
    """Minimal big-endian digits of n. Zero is a single zero byte."""
    check_unsigned(n)
    return n.to_bytes(max(1, (n.bit_length() + 7) // 8), "big")


def radix256_decode(data: Union[bytes, bytearray, memoryview, Iterable[int]]) -> int:
    """Integer value of big-endian base-256 digits. Leading zero bytes are allowed."""
    if isinstance(data, (int, str)):
        raise InvalidInputError(f"Not a base-256 digit sequence: {type(data).__name__}")
    try:
        digits = bytes(data)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"Not a base-256 digit sequence: {e}") from e
    return int.from_bytes(digits, "big")
