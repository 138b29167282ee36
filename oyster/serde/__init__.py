# oyster/serde/__init__.py
"""
Field-level converters that let a record serializer carry big integers and
binary blobs as oyster text.
"""

from abc import ABC, abstractmethod
from typing import Any

from oyster.core.btt64 import btt64_decode, btt64_decode_str, btt64_encode, btt64_encode_str
from oyster.core.radix64 import radix64_decode, radix64_encode


class FieldFormat(ABC):
    """Abstract base for a value <-> string field converter."""

    @abstractmethod
    def serialize(self, value: Any) -> str:
        pass

    @abstractmethod
    def deserialize(self, text: str) -> Any:
        pass


class BigUintFormat(FieldFormat):
    """Unsigned integer field stored as radix64 text."""

    def serialize(self, value: int) -> str:
        return radix64_encode(value)

    def deserialize(self, text: str) -> int:
        return radix64_decode(text)


class BytesFormat(FieldFormat):
    """Binary field stored as btt64 text."""

    def serialize(self, value: bytes) -> str:
        return btt64_encode(value)

    def deserialize(self, text: str) -> bytes:
        return btt64_decode(text)


class TextFormat(FieldFormat):
    """String field stored as btt64 text of its UTF-8 bytes."""

    def serialize(self, value: str) -> str:
        return btt64_encode_str(value)

    def deserialize(self, text: str) -> str:
        return btt64_decode_str(text)


def create_format(name: str) -> FieldFormat:
    if name == "biguint":
        return BigUintFormat()
    elif name == "bytes":
        return BytesFormat()
    elif name == "text":
        return TextFormat()
    else:
        raise ValueError(f"Unsupported field format: {name}")


from .record import (
    FieldDecodeError,
    FieldFailure,
    RecordCheck,
    check_record,
    decode_record,
    dumps_record,
    encode_record,
    loads_record,
)

__all__ = [
    "FieldFormat", "BigUintFormat", "BytesFormat", "TextFormat", "create_format",
    "FieldDecodeError", "FieldFailure", "RecordCheck",
    "encode_record", "decode_record", "dumps_record", "loads_record", "check_record",
]
