"""Primitive field types understood by the accessor."""

from __future__ import annotations

from enum import Enum
from typing import Any, Union

from .exceptions import UnknownTypeError


class FieldType(Enum):
    """Declared type of a schema field."""

    INVALID = "invalid"
    BOOL = "bool"
    INT = "int"
    STRING = "string"
    MAP = "map"

    def __str__(self) -> str:
        return self.value

    @property
    def is_primitive(self) -> bool:
        return self in _PRIMITIVES

    def zero(self) -> Any:
        """Return the natural zero value for this type."""
        if self is FieldType.BOOL:
            return False
        if self is FieldType.INT:
            return 0
        if self is FieldType.STRING:
            return ""
        if self is FieldType.MAP:
            return {}
        raise UnknownTypeError.without_zero(self)

    @classmethod
    def from_tag(cls, tag: Any) -> Union["FieldType", Any]:
        """
        Resolve a declared type tag.

        Accepts an existing ``FieldType`` or a case-insensitive string such as
        ``"int"``. Unrecognized tags are returned unchanged; the accessor
        reports them as ``UnknownTypeError`` when the field is touched.
        """
        if isinstance(tag, FieldType):
            return tag
        if isinstance(tag, str):
            try:
                return cls(tag.strip().lower())
            except ValueError:
                return tag
        return tag


_PRIMITIVES = frozenset({FieldType.BOOL, FieldType.INT, FieldType.STRING, FieldType.MAP})


def primitive_types() -> tuple[FieldType, ...]:
    return (FieldType.BOOL, FieldType.INT, FieldType.STRING, FieldType.MAP)


def is_primitive(field_type: Any) -> bool:
    """Return True when *field_type* is one of the recognized primitive kinds."""
    return isinstance(field_type, FieldType) and field_type.is_primitive


__all__ = ["FieldType", "is_primitive", "primitive_types"]
