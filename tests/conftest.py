"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import pytest

from fieldschema import FieldData, FieldSchema, FieldType, build_schema
from fieldschema.config import ABORT_ON_MISUSE_ENV, DECODE_MODE_ENV
from fieldschema.decoding import WeakDecoder


@pytest.fixture(autouse=True)
def clean_fieldschema_env(monkeypatch):
    """Keep accessor settings independent of the developer's environment."""
    monkeypatch.delenv(DECODE_MODE_ENV, raising=False)
    monkeypatch.delenv(ABORT_ON_MISUSE_ENV, raising=False)


@pytest.fixture
def schema():
    return build_schema(
        {
            "enabled": FieldSchema(FieldType.BOOL, default=False),
            "count": FieldSchema(FieldType.INT),
            "retries": FieldSchema(FieldType.INT, default=3),
            "name": FieldSchema(FieldType.STRING),
            "labels": FieldSchema(FieldType.MAP),
            "ttl": FieldSchema("duration"),
        }
    )


@pytest.fixture
def make_field_data(schema):
    """Build a FieldData over *raw* with the shared schema and the weak decoder."""

    def _make(raw, **kwargs):
        kwargs.setdefault("decoder", WeakDecoder())
        kwargs.setdefault("abort_on_misuse", False)
        return FieldData(raw, kwargs.pop("schema", schema), **kwargs)

    return _make


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handlers and levels installed by setup_logging."""
    package_logger = logging.getLogger("fieldschema")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)
