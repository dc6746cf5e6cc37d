"""Strict decoding: accept values that already have the declared type."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict

from ..field_type import FieldType
from .base import DecodeError, Decoder
from .weak import unwrap_numpy


class StrictDecoder(Decoder):
    """Reject any value that would need converting."""

    name = "strict"

    def decode_bool(self, value: Any) -> bool:
        value = unwrap_numpy(value)
        if isinstance(value, bool):
            return value
        raise DecodeError(value, FieldType.BOOL, reason="strict decoding requires a boolean")

    def decode_int(self, value: Any) -> int:
        value = unwrap_numpy(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise DecodeError(value, FieldType.INT, reason="strict decoding requires an integer")

    def decode_string(self, value: Any) -> str:
        if isinstance(value, str):
            return str(value)
        raise DecodeError(value, FieldType.STRING, reason="strict decoding requires a string")

    def decode_map(self, value: Any) -> Dict[str, Any]:
        if not isinstance(value, Mapping):
            raise DecodeError(value, FieldType.MAP, reason="strict decoding requires a mapping")
        non_string = [key for key in value if not isinstance(key, str)]
        if non_string:
            raise DecodeError(value, FieldType.MAP, reason=f"non-string key(s): {non_string!r}")
        return dict(value)


__all__ = ["StrictDecoder"]
