# oyster/core/errors.py
from typing import Optional


class InvalidInputError(ValueError):
    """Base class for every decode failure. Encoders never raise it."""


class InvalidSymbolError(InvalidInputError):
    def __init__(self, symbol: str, position: Optional[int] = None):
        self.symbol = symbol
        self.position = position
        where = f" at position {position}" if position is not None else ""
        super().__init__(f"Invalid symbol {symbol!r}{where}")


class MalformedBlockError(InvalidInputError):
    """Single-symbol tail, or a block head with bits outside its mask."""


class EmptyInputError(InvalidInputError):
    pass


class LengthOverflowError(InvalidInputError):
    pass


class InvalidUtf8Error(InvalidInputError):
    pass
