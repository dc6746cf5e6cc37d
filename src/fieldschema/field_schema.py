"""Field descriptors and schema construction."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Union

from .exceptions import SchemaDefinitionError, UnknownTypeError
from .field_type import FieldType

SchemaStore = Mapping[str, "FieldSchema"]


@dataclass(frozen=True)
class FieldSchema:
    """
    Declared type and default value for one schema field.

    ``type`` is normally a :class:`FieldType`. Any other value is kept as the
    raw tag so that accessors can report it as an unknown type.
    """

    type: Union[FieldType, Any]
    default: Any = None
    description: str = ""

    def default_or_zero(self) -> Any:
        """Return the declared default, or the zero value of the declared type."""
        if self.default is not None:
            if isinstance(self.default, Mapping):
                return dict(self.default)
            return self.default
        if not isinstance(self.type, FieldType):
            raise UnknownTypeError.without_zero(self.type)
        return self.type.zero()


def _schema_entry(name: Any, entry: Any) -> FieldSchema:
    if isinstance(entry, FieldSchema):
        return entry
    if isinstance(entry, (str, FieldType)):
        return FieldSchema(type=FieldType.from_tag(entry))
    if not isinstance(entry, Mapping):
        raise SchemaDefinitionError.invalid_entry(name, f"expected a type tag or mapping, got {type(entry).__name__}")
    if "type" not in entry:
        raise SchemaDefinitionError.invalid_entry(name, "missing 'type'")

    description = entry.get("description", "")
    if not isinstance(description, str):
        raise SchemaDefinitionError.invalid_entry(name, "'description' must be a string")

    unexpected = sorted(set(entry) - {"type", "default", "description"})
    if unexpected:
        raise SchemaDefinitionError.invalid_entry(name, f"unexpected key(s): {', '.join(map(str, unexpected))}")

    return FieldSchema(
        type=FieldType.from_tag(entry["type"]),
        default=entry.get("default"),
        description=description,
    )


def build_schema(declaration: Mapping[str, Any]) -> SchemaStore:
    """
    Build a read-only schema from plain configuration data.

    Each entry is either a bare type tag (``{"count": "int"}``), a mapping with
    ``type`` and optional ``default``/``description`` keys, or an existing
    :class:`FieldSchema`.

    Raises:
        SchemaDefinitionError: If the declaration is structurally malformed
    """
    if not isinstance(declaration, Mapping):
        raise SchemaDefinitionError(f"schema declaration must be a mapping, got {type(declaration).__name__}")

    fields: dict[str, FieldSchema] = {}
    for name, entry in declaration.items():
        if not isinstance(name, str) or not name:
            raise SchemaDefinitionError.invalid_entry(name, "field names must be non-empty strings")
        fields[name] = _schema_entry(name, entry)
    return MappingProxyType(fields)


__all__ = ["FieldSchema", "SchemaStore", "build_schema"]
