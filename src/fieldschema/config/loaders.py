"""JSON loading for schema declarations and raw records."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Union

import orjson

from ..exceptions import ConfigurationError, RecordFormatError
from ..field_schema import SchemaStore, build_schema

logger = logging.getLogger(__name__)

JsonLike = Union[str, bytes, bytearray, memoryview]


def parse_record(payload: JsonLike) -> Dict[str, Any]:
    """
    Decode a JSON document into a raw record.

    Args:
        payload: JSON text or bytes

    Returns:
        Mapping of field names to untyped values

    Raises:
        RecordFormatError: If the payload is not valid JSON or not an object
    """
    try:
        data = orjson.loads(payload)
    except orjson.JSONDecodeError as exc:
        raise RecordFormatError.unparsable(str(exc)) from exc
    if not isinstance(data, dict):
        raise RecordFormatError.not_an_object(type(data).__name__)
    return data


def load_record(path: Path) -> Dict[str, Any]:
    """Read and decode a raw record stored as a JSON file."""
    try:
        payload = path.read_bytes()
    except OSError as exc:
        raise ConfigurationError.load_failed("record", str(path)) from exc
    return parse_record(payload)


def load_schema(path: Path) -> SchemaStore:
    """
    Load a schema declaration from a JSON file.

    The file holds an object mapping field names to a type tag or to
    ``{"type": ..., "default": ..., "description": ...}``.

    Raises:
        ConfigurationError: If the file is missing or is not a JSON object
        SchemaDefinitionError: If an entry is malformed
    """
    if not path.exists():
        raise ConfigurationError(f"Schema file {path} does not exist")
    try:
        declaration = orjson.loads(path.read_bytes())
    except orjson.JSONDecodeError as exc:
        raise ConfigurationError(f"Failed to parse JSON schema {path}") from exc
    except OSError as exc:  # pragma: no cover - filesystem access failure
        raise ConfigurationError.load_failed("schema", str(path)) from exc

    if not isinstance(declaration, dict):
        raise ConfigurationError(f"JSON schema {path} must contain an object at the top level")

    schema = build_schema(declaration)
    logger.debug("Loaded %d schema field(s) from %s", len(schema), path)
    return schema


__all__ = ["load_record", "load_schema", "parse_record"]
