# oyster/core/canon.py
import json
from typing import Any

try:
    import jcs
except ImportError:
    raise ImportError("Please install jcs: pip install jcs")

from oyster.core.errors import InvalidInputError

def canonical_json(obj: Any) -> bytes:
    """
    Produce deterministic UTF-8 bytes according to RFC 8785 (JSON Canonicalization Scheme).
    Equal records always serialize to the same bytes, whatever their key order.
    """
    return jcs.canonicalize(obj)


def parse_json(raw: bytes | str) -> Any:
    """Inverse of canonical_json for records; accepts bytes or str."""
    try:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8")
        return json.loads(raw)
    except UnicodeDecodeError as e:
        raise InvalidInputError(f"Record is not valid UTF-8: {e.reason}") from e
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Record is not valid JSON: {e.msg} (char {e.pos})") from e
