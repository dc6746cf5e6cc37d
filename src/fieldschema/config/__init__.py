"""Configuration helpers: environment settings and JSON loaders."""

from .loaders import load_record, load_schema, parse_record
from .runtime import (
    ABORT_ON_MISUSE_ENV,
    DECODE_MODE_ENV,
    Settings,
    env_bool,
    env_str,
    load_settings,
)

__all__ = [
    "ABORT_ON_MISUSE_ENV",
    "DECODE_MODE_ENV",
    "Settings",
    "env_bool",
    "env_str",
    "load_record",
    "load_schema",
    "load_settings",
    "parse_record",
]
