"""Validate JSON records against a schema file.

Usage:
    python -m fieldschema --schema schema.json record.json [record.json ...]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import load_record, load_schema
from .decoding import get_decoder
from .exceptions import ConfigurationError, FieldDataError, RecordFormatError, SchemaDefinitionError
from .field_data import FieldData
from .logging_config import setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fieldschema", description="Validate JSON records against a field schema.")
    parser.add_argument("--schema", required=True, type=Path, help="JSON file mapping field names to types")
    parser.add_argument("records", nargs="+", type=Path, help="JSON record file(s) to validate")
    parser.add_argument("--strict", action="store_true", help="Require exact types instead of weak conversion")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        schema = load_schema(args.schema)
    except (ConfigurationError, SchemaDefinitionError) as exc:
        print(f"ERROR {args.schema}: {exc}", file=sys.stderr)
        return EXIT_USAGE

    decoder = get_decoder("strict" if args.strict else "weak")
    exit_code = EXIT_OK
    for path in args.records:
        try:
            record = load_record(path)
        except (ConfigurationError, RecordFormatError) as exc:
            print(f"ERROR {path}: {exc}", file=sys.stderr)
            return EXIT_USAGE

        try:
            FieldData(record, schema, decoder=decoder, abort_on_misuse=False).validate()
        except FieldDataError as exc:
            logger.info("Record %s failed validation", path)
            print(f"FAIL {path}: {exc}")
            exit_code = EXIT_INVALID
            continue
        print(f"OK {path}")

    return exit_code


__all__ = ["main"]
