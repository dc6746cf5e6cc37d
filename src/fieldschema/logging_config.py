"""
Logging configuration for the fieldschema command line tool.

The library itself only creates module loggers; applications embedding it
configure handlers themselves.
"""

import logging
import sys
import threading
from typing import Union

_config_lock = threading.Lock()
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_HANDLER_NAME = "fieldschema-console"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Configure a single console handler on the ``fieldschema`` logger.

    Calling this more than once replaces the level without stacking handlers.
    """
    resolved_level = _resolve_level(level)
    package_logger = logging.getLogger("fieldschema")

    with _config_lock:
        for handler in list(package_logger.handlers):
            if handler.get_name() == _HANDLER_NAME:
                package_logger.removeHandler(handler)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        package_logger.addHandler(console_handler)
        package_logger.setLevel(resolved_level)

    return package_logger


__all__ = ["setup_logging"]
