"""
Typed access to loosely typed input data.

``FieldData`` pairs one raw record (for example a decoded request body) with a
schema and hands back values converted to each field's declared type. The
getters differ only in how they report failure:

- ``get_ok_err`` never raises; problems come back in the result's ``error``.
- ``get_ok`` reports presence, and treats any lookup error as a contract
  violation.
- ``get`` returns the value or the field's default, with the same contract
  violation behaviour.

Call ``validate`` once on untrusted input before using ``get``/``get_ok``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any, NamedTuple, NoReturn, Optional, Tuple

from .config import load_settings, parse_record
from .config.loaders import JsonLike
from .decoding import DecodeError, Decoder, get_decoder
from .exceptions import (
    ContractViolationError,
    ConversionError,
    FieldDataError,
    UnknownFieldError,
    UnknownTypeError,
)
from .field_schema import FieldSchema, SchemaStore
from .field_type import is_primitive

logger = logging.getLogger(__name__)


class LookupResult(NamedTuple):
    """Outcome of ``FieldData.get_ok_err``."""

    value: Any
    present: bool
    error: Optional[FieldDataError]


class FieldData:
    """Schema-driven accessor over one raw record."""

    def __init__(
        self,
        raw: Mapping[str, Any],
        schema: SchemaStore,
        *,
        decoder: Optional[Decoder] = None,
        abort_on_misuse: Optional[bool] = None,
    ) -> None:
        if decoder is None or abort_on_misuse is None:
            settings = load_settings()
            if decoder is None:
                decoder = get_decoder(settings.decode_mode)
            if abort_on_misuse is None:
                abort_on_misuse = settings.abort_on_misuse
        self.raw = raw
        self.schema = schema
        self.decoder = decoder
        self.abort_on_misuse = abort_on_misuse

    @classmethod
    def from_json(cls, payload: JsonLike, schema: SchemaStore, **kwargs: Any) -> "FieldData":
        """Build an accessor from a JSON object document."""
        return cls(parse_record(payload), schema, **kwargs)

    def validate(self) -> None:
        """
        Check that every present, declared field converts to its type.

        Fields missing from the schema are ignored. Stops at the first failure;
        with several bad fields, which one is reported depends on the raw
        mapping's iteration order.

        Raises:
            UnknownTypeError: If a present field declares an unrecognized type
            ConversionError: If a present field cannot be converted
        """
        for field, value in self.raw.items():
            field_schema = self.schema.get(field)
            if field_schema is None:
                logger.debug("Ignoring field %s: not declared in schema", field)
                continue

            if not is_primitive(field_schema.type):
                raise UnknownTypeError.for_field(field, field_schema.type)

            result = self._get_primitive(field, field_schema)
            if result.error is not None:
                raise result.error

    def get(self, key: str) -> Any:
        """
        Return the converted value for *key*, or its default when unset.

        Raises:
            ContractViolationError: If *key* is not declared or cannot be read
        """
        field_schema = self.schema.get(key)
        if field_schema is None:
            self._contract_violation(ContractViolationError.undeclared_field(key))

        value, present = self.get_ok(key)
        if not present:
            return field_schema.default_or_zero()
        return value

    def get_ok(self, key: str) -> Tuple[Any, bool]:
        """
        Return ``(value, present)`` for *key*.

        ``present`` is False when the raw record does not contain the key; the
        value slot then holds the field's default. A ``None`` coming back from
        the decoder is also replaced by the default.

        Raises:
            ContractViolationError: If the lookup reports any error
        """
        result = self.get_ok_err(key)
        if result.error is not None:
            self._contract_violation(ContractViolationError.read_failed(key, result.error))

        value = result.value
        if value is None:
            value = self.schema[key].default_or_zero()
        return value, result.present

    def get_ok_err(self, key: str) -> LookupResult:
        """Look up *key*, returning failures in the result instead of raising."""
        field_schema = self.schema.get(key)
        if field_schema is None:
            return LookupResult(None, False, UnknownFieldError.for_field(key))

        if not is_primitive(field_schema.type):
            return LookupResult(None, False, UnknownTypeError.for_field(key, field_schema.type))

        return self._get_primitive(key, field_schema)

    def get_default_or_zero(self, key: str) -> Any:
        """Return the declared default for *key*, ignoring the raw record."""
        field_schema = self.schema.get(key)
        if field_schema is None:
            self._contract_violation(ContractViolationError.undeclared_field(key))
        try:
            return field_schema.default_or_zero()
        except UnknownTypeError as exc:
            self._contract_violation(ContractViolationError.read_failed(key, exc))

    def get_first(self, *keys: str) -> Tuple[Any, bool]:
        """Return ``get_ok`` for the first of *keys* present in the raw record."""
        for key in keys:
            value, present = self.get_ok(key)
            if present:
                return value, True
        return None, False

    def _get_primitive(self, key: str, field_schema: FieldSchema) -> LookupResult:
        if key not in self.raw:
            return LookupResult(None, False, None)

        raw_value = self.raw[key]
        try:
            value = self.decoder.decode(raw_value, field_schema.type)
        except DecodeError as exc:
            logger.debug("Field %s rejected %r as %s: %s", key, raw_value, field_schema.type, exc)
            error = ConversionError.for_value(key, raw_value, exc.reason)
            error.__cause__ = exc
            return LookupResult(None, True, error)
        return LookupResult(value, True, None)

    def _contract_violation(self, error: ContractViolationError) -> NoReturn:
        if self.abort_on_misuse:
            logger.critical("Aborting on field access misuse: %s", error)
            os.abort()
        logger.error("Field access misuse: %s", error)
        if error.cause is not None:
            raise error from error.cause
        raise error

    def __repr__(self) -> str:
        return f"FieldData(fields={len(self.raw)}, schema={len(self.schema)}, decoder={self.decoder!r})"


__all__ = ["FieldData", "LookupResult"]
