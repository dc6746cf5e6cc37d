"""
Weak decoding: best-effort conversion between loosely typed representations.

Conversions follow the usual weak-typing rules for request payloads and
configuration blobs:

- bool:   numbers are ``!= 0``; strings accept ``1/t/T/TRUE/true/True`` and
          ``0/f/F/FALSE/false/False``; ``""`` is False
- int:    bools are 1/0; floats truncate toward zero; strings are integer
          literals (``0x``/``0o``/``0b`` prefixes, a leading ``0`` is octal,
          no surrounding whitespace); ``""`` is 0
- string: bools are ``"1"``/``"0"``; numbers are rendered without exponent;
          bytes are decoded as UTF-8
- map:    mappings get string keys; an empty list is ``{}``; a list of
          mappings is merged in order
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Dict

import numpy as np

from ..field_type import FieldType
from .base import DecodeError, Decoder

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def unwrap_numpy(value: Any) -> Any:
    """Return the Python scalar behind a numpy scalar, otherwise *value*."""
    if isinstance(value, np.generic) and not isinstance(value, (np.str_, np.bytes_)):
        return value.item()
    return value


def _parse_int_literal(text: str) -> int:
    if text != text.strip():
        raise ValueError(f"surrounding whitespace in {text!r}")
    sign, body = "", text
    if body[:1] in ("+", "-"):
        sign, body = body[0], body[1:]
    # a bare leading zero marks an octal literal: "010" is 8
    if len(body) > 1 and body[0] == "0" and body[1] in "0123456789":
        return int(sign + body[1:], 8)
    return int(text, 0)


class WeakDecoder(Decoder):
    """Coerce values across representations, failing only without a sensible conversion."""

    name = "weak"

    def decode_bool(self, value: Any) -> bool:
        value = unwrap_numpy(value)
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, str):
            if value == "" or value in _FALSE_STRINGS:
                return False
            if value in _TRUE_STRINGS:
                return True
            raise DecodeError(value, FieldType.BOOL, reason="not a boolean literal")
        raise DecodeError(value, FieldType.BOOL)

    def decode_int(self, value: Any) -> int:
        value = unwrap_numpy(value)
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if not math.isfinite(value):
                raise DecodeError(value, FieldType.INT, reason="not a finite number")
            return int(value)
        if isinstance(value, str):
            if value == "":
                return 0
            try:
                return _parse_int_literal(value)
            except ValueError as exc:
                raise DecodeError(value, FieldType.INT, reason="not an integer literal") from exc
        raise DecodeError(value, FieldType.INT)

    def decode_string(self, value: Any) -> str:
        value = unwrap_numpy(value)
        if isinstance(value, str):
            return str(value)
        if isinstance(value, bool):
            return "1" if value else "0"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return np.format_float_positional(value, trim="-")
        if isinstance(value, (bytes, bytearray)):
            try:
                return bytes(value).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise DecodeError(value, FieldType.STRING, reason="bytes are not valid UTF-8") from exc
        raise DecodeError(value, FieldType.STRING)

    def decode_map(self, value: Any) -> Dict[str, Any]:
        if isinstance(value, Mapping):
            result: Dict[str, Any] = {}
            for key, item in value.items():
                try:
                    result[self.decode_string(key)] = item
                except DecodeError as exc:
                    raise DecodeError(value, FieldType.MAP, reason=f"key {key!r} is not string-like") from exc
            return result
        if isinstance(value, (list, tuple)):
            merged: Dict[str, Any] = {}
            for entry in value:
                if not isinstance(entry, Mapping):
                    raise DecodeError(value, FieldType.MAP, reason="list entries must be mappings")
                merged.update(self.decode_map(entry))
            return merged
        raise DecodeError(value, FieldType.MAP)


__all__ = ["WeakDecoder", "unwrap_numpy"]
