# oyster/core/radix64.py
"""
Base-64 positional numeral system for unsigned integers.

Digits use the oyster alphabet, most significant first: 0 -> "0", 64 -> "10".
"""

from oyster.core.alphabet import ALPHABET, indexes_of
from oyster.core.errors import EmptyInputError, LengthOverflowError

BASE = 64

# Highest digit position (exponent) accepted by radix64_decode
MAX_DIGIT_EXPONENT = 2**32 - 1


def check_unsigned(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Expected a non-negative int, got {type(n).__name__}")
    if n < 0:
        raise ValueError("Negative integers not supported")


def radix64_encode(n: int) -> str:
    """Canonical radix64 text for n (no leading zero digits)."""
    check_unsigned(n)
    digits = []
    while True:
        n, r = divmod(n, BASE)
        digits.append(ALPHABET[r])
        if n == 0:
            break
    digits.reverse()
    return "".join(digits)


def radix64_decode(text: str) -> int:
    """
    Integer value of radix64 text.
    Raises EmptyInputError, LengthOverflowError or InvalidSymbolError.
    """
    if not text:
        raise EmptyInputError("Empty radix64 string")
    if len(text) - 1 > MAX_DIGIT_EXPONENT:
        raise LengthOverflowError(
            f"radix64 string too long: {len(text)} digits (max {MAX_DIGIT_EXPONENT + 1})"
        )

    value = 0
    for digit in indexes_of(text):
        value = value * BASE + digit
    return value
