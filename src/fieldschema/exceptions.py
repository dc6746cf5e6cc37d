"""Exception classes for schema-driven field access.

Two separate families hang off :class:`FieldSchemaError`:

1. ``FieldDataError`` and subclasses describe problems with a lookup or with
   the data itself. They are returned from ``FieldData.get_ok_err`` and raised
   from ``FieldData.validate``.
2. ``ContractViolationError`` marks programmer error: a ``get``/``get_ok`` call
   site used a key or record that it assumed was valid.

Exception classes accept keyword arguments that are stored as attributes for
debugging: ``err = ConversionError.for_value("count", "abc"); err.field``.
"""

from __future__ import annotations

from typing import Any


class FieldSchemaError(Exception):
    """Base exception for all field schema errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Field schema error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class FieldDataError(FieldSchemaError):
    """Field lookup or conversion failed."""


class UnknownFieldError(FieldDataError):
    """Requested field is not declared in the schema."""

    @classmethod
    def for_field(cls, field: str) -> "UnknownFieldError":
        return cls(f"unknown field: {field}", field=field)


class UnknownTypeError(FieldDataError):
    """Schema declares a type the accessor does not recognize."""

    @classmethod
    def for_field(cls, field: str, field_type: Any) -> "UnknownTypeError":
        return cls(f"unknown field type {field_type} for field {field}", field=field, field_type=field_type)

    @classmethod
    def without_zero(cls, field_type: Any) -> "UnknownTypeError":
        return cls(f"field type {field_type} has no zero value", field=None, field_type=field_type)


class ConversionError(FieldDataError):
    """Raw value could not be converted to the declared field type."""

    @classmethod
    def for_value(cls, field: str, value: Any, reason: str = "") -> "ConversionError":
        msg = f"error converting input {value!r} for field {field}"
        if reason:
            msg += f": {reason}"
        return cls(msg, field=field, value=value)


class ContractViolationError(FieldSchemaError):
    """Field accessor was used in a way the schema does not allow."""

    @classmethod
    def undeclared_field(cls, key: str) -> "ContractViolationError":
        return cls(f"field {key} not in the schema", key=key, cause=None)

    @classmethod
    def read_failed(cls, key: str, cause: Exception) -> "ContractViolationError":
        return cls(f"error reading {key}: {cause}", key=key, cause=cause)


class SchemaDefinitionError(FieldSchemaError):
    """Schema declaration is malformed."""

    @classmethod
    def invalid_entry(cls, name: Any, reason: str) -> "SchemaDefinitionError":
        return cls(f"invalid schema entry {name!r}: {reason}", field=name)


class RecordFormatError(FieldSchemaError):
    """Raw record payload is not a JSON object."""

    @classmethod
    def not_an_object(cls, payload_type: str) -> "RecordFormatError":
        return cls(f"record must be a JSON object, got {payload_type}")

    @classmethod
    def unparsable(cls, reason: str) -> "RecordFormatError":
        return cls(f"record is not valid JSON: {reason}")


class ConfigurationError(FieldSchemaError):
    """Configuration is invalid or missing."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Configuration is invalid or missing"
        super().__init__(message, **kwargs)

    @classmethod
    def invalid_value(cls, param_name: str, value: Any, reason: str = "") -> "ConfigurationError":
        """Create error for invalid value."""
        msg = f"Invalid value for {param_name}: {value!r}"
        if reason:
            msg += f". {reason}"
        return cls(msg)

    @classmethod
    def load_failed(cls, resource: str, identifier: str = "") -> "ConfigurationError":
        """Create error for failed resource load."""
        msg = f"Failed to load {resource}"
        if identifier:
            msg += f" for {identifier}"
        return cls(msg)


__all__ = [
    "ConfigurationError",
    "ContractViolationError",
    "ConversionError",
    "FieldDataError",
    "FieldSchemaError",
    "RecordFormatError",
    "SchemaDefinitionError",
    "UnknownFieldError",
    "UnknownTypeError",
]
