# oyster/serde/record.py
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from oyster.core.canon import canonical_json, parse_json
from oyster.core.errors import InvalidInputError
from . import FieldFormat

Fields = Mapping[str, FieldFormat]


class FieldDecodeError(InvalidInputError):
    """A single record field could not be converted back from its text form."""

    def __init__(self, field_name: str, reason: str):
        self.field = field_name
        self.reason = reason
        super().__init__(f"Field '{field_name}': {reason}")


@dataclass
class FieldFailure:
    field: str
    message: str


@dataclass
class RecordCheck:
    is_valid: bool
    failures: List[FieldFailure] = field(default_factory=list)

    @property
    def first_failure(self) -> Optional[FieldFailure]:
        return self.failures[0] if self.failures else None

    def __bool__(self):
        return self.is_valid

    def __str__(self):
        if self.is_valid:
            return "Record is valid"
        lines = [f"Record check FAILED ({len(self.failures)} fields):"]
        for f in self.failures:
            lines.append(f"  • {f.field}: {f.message}")
        return "\n".join(lines)


def encode_record(record: Mapping[str, Any], fields: Fields) -> Dict[str, Any]:
    """Copy of record with every field named in `fields` converted to text."""
    out = dict(record)
    for name, fmt in fields.items():
        if name in out:
            out[name] = fmt.serialize(out[name])
    return out


def _decode_field(name: str, value: Any, fmt: FieldFormat) -> Any:
    if not isinstance(value, str):
        raise FieldDecodeError(name, f"expected a string, got {type(value).__name__}")
    try:
        return fmt.deserialize(value)
    except InvalidInputError as e:
        raise FieldDecodeError(name, str(e)) from e


def decode_record(data: Mapping[str, Any], fields: Fields) -> Dict[str, Any]:
    """
    Inverse of encode_record. Stops at the first bad field with FieldDecodeError;
    fields missing from data are skipped.
    """
    out = dict(data)
    for name, fmt in fields.items():
        if name in out:
            out[name] = _decode_field(name, out[name], fmt)
    return out


def dumps_record(record: Mapping[str, Any], fields: Fields) -> bytes:
    """Canonical JSON bytes (RFC 8785) of the encoded record."""
    return canonical_json(encode_record(record, fields))


def loads_record(raw: bytes | str, fields: Fields) -> Dict[str, Any]:
    data = parse_json(raw)
    if not isinstance(data, dict):
        raise InvalidInputError(f"Expected a JSON object, got {type(data).__name__}")
    return decode_record(data, fields)


def check_record(data: Mapping[str, Any], fields: Fields) -> RecordCheck:
    """Try every converted field and collect all failures instead of stopping at the first."""
    result = RecordCheck(True)
    for name, fmt in fields.items():
        if name not in data:
            continue
        try:
            _decode_field(name, data[name], fmt)
        except FieldDecodeError as e:
            result.failures.append(FieldFailure(name, e.reason))
            result.is_valid = False
    return result
