"""Decoder interface shared by the weak and strict coercion backends."""

from __future__ import annotations

from typing import Any, Callable, Dict

from ..field_type import FieldType, primitive_types

Handler = Callable[[Any], Any]


class DecodeError(ValueError):
    """Raised when a value cannot be decoded into the requested type."""

    def __init__(self, value: Any, field_type: Any, *, reason: str = "") -> None:
        message = f"cannot decode {type(value).__name__} {value!r} as {field_type}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.value = value
        self.field_type = field_type
        self.reason = reason


class Decoder:
    """
    Convert raw values into one of the primitive field types.

    Subclasses provide ``decode_bool``, ``decode_int``, ``decode_string`` and
    ``decode_map``. Every primitive kind must have a handler; a decoder missing
    one fails at construction rather than at first use.

    ``None`` decodes to the zero value of the requested kind, the way an
    untouched decode target keeps its zero value.
    """

    name = "base"

    def __init__(self) -> None:
        self._handlers: Dict[FieldType, Handler] = {}
        missing = []
        for kind in primitive_types():
            handler = getattr(self, f"decode_{kind.value}", None)
            if handler is None:
                missing.append(kind)
            else:
                self._handlers[kind] = handler
        if missing:
            raise TypeError(f"{type(self).__name__} has no handler for {', '.join(map(str, missing))}")

    def decode(self, value: Any, field_type: FieldType) -> Any:
        """
        Decode *value* into *field_type*.

        Raises:
            DecodeError: If the value has no sensible conversion
        """
        handler = self._handlers.get(field_type)
        if handler is None:
            raise DecodeError(value, field_type, reason="not a primitive field type")
        if value is None:
            return field_type.zero()
        return handler(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["DecodeError", "Decoder"]
