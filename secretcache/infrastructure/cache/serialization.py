"""Payload codec between cache values and stored bytes.

Strings are stored verbatim; every other value is stored as strict JSON.
Reading reverses this heuristically: a payload that parses as JSON is
returned as the parsed value, anything else as text. No type tag is stored.

Known limitation:
    A string that is itself valid JSON comes back parsed. Storing "42"
    reads back 42, "true" reads back True, "null" reads back None. Callers
    that need exact strings must wrap them (e.g. store {"value": "42"}).
"""

import json
from typing import Any

from secretcache.domain.errors import UnserializableValueError


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {name}")


class SerializationCodec:
    """Encode cache values to bytes and back.

    Attributes:
        encoding: Text encoding for string payloads (default: utf-8).
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def encode(self, value: Any) -> bytes:
        """Encode a value for storage.

        Args:
            value: A str (stored verbatim) or any JSON-representable value.

        Returns:
            Payload bytes.

        Raises:
            UnserializableValueError: If value is not a str and cannot be
                encoded as strict JSON (NaN and Infinity are rejected).
        """
        if isinstance(value, str):
            return value.encode(self.encoding)
        try:
            encoded = json.dumps(value, allow_nan=False, separators=(",", ":"))
        except (TypeError, ValueError, RecursionError) as e:
            raise UnserializableValueError(value) from e
        return encoded.encode(self.encoding)

    def decode(self, payload: bytes) -> Any:
        """Decode a stored payload.

        Args:
            payload: Raw bytes from the store.

        Returns:
            The parsed JSON value when the payload is valid JSON (including
            None for a literal null), otherwise the payload as text. Text
            nested too deeply for the JSON parser is returned as text too.
        """
        try:
            return json.loads(payload, parse_constant=_reject_constant)
        except (ValueError, RecursionError):
            return payload.decode(self.encoding, errors="replace")
