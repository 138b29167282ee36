# oyster/core/alphabet.py
from typing import Dict

from oyster.core.errors import InvalidSymbolError

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-_"

_INDEX: Dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}


def symbol_at(index: int) -> str:
    """Symbol for a 6-bit index (0..63)."""
    if not 0 <= index < 64:
        raise IndexError(f"Alphabet index out of range: {index}")
    return ALPHABET[index]


def index_of(symbol: str) -> int:
    """6-bit index of a symbol. Raises InvalidSymbolError if it is not in the alphabet."""
    try:
        return _INDEX[symbol]
    except (KeyError, TypeError):
        raise InvalidSymbolError(symbol) from None


def indexes_of(text: str) -> list:
    """Look up every symbol of text, reporting the position of the first bad one."""
    index = _INDEX
    out = []
    for pos, ch in enumerate(text):
        i = index.get(ch)
        if i is None:
            raise InvalidSymbolError(ch, pos)
        out.append(i)
    return out
