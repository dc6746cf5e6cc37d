"""Schema-driven typed access to loosely typed records."""

from .decoding import DecodeError, Decoder, StrictDecoder, WeakDecoder, get_decoder
from .exceptions import (
    ConfigurationError,
    ContractViolationError,
    ConversionError,
    FieldDataError,
    FieldSchemaError,
    RecordFormatError,
    SchemaDefinitionError,
    UnknownFieldError,
    UnknownTypeError,
)
from .field_data import FieldData, LookupResult
from .field_schema import FieldSchema, SchemaStore, build_schema
from .field_type import FieldType

__all__ = [
    "ConfigurationError",
    "ContractViolationError",
    "ConversionError",
    "DecodeError",
    "Decoder",
    "FieldData",
    "FieldDataError",
    "FieldSchema",
    "FieldSchemaError",
    "FieldType",
    "LookupResult",
    "RecordFormatError",
    "SchemaDefinitionError",
    "SchemaStore",
    "StrictDecoder",
    "UnknownFieldError",
    "UnknownTypeError",
    "WeakDecoder",
    "build_schema",
    "get_decoder",
]
