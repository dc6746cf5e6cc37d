from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from dataclasses import dataclass

from ..exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

DECODE_MODE_ENV = "FIELDSCHEMA_DECODE_MODE"
ABORT_ON_MISUSE_ENV = "FIELDSCHEMA_ABORT_ON_MISUSE"

_DEFAULT_DECODE_MODE = "weak"
_DECODE_MODES = ("weak", "strict")


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    return value


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Environment variable {name!r} must be a boolean (allowed: {sorted(_TRUE_VALUES | _FALSE_VALUES)}, got {raw!r})"
    )


@dataclass(frozen=True)
class Settings:
    """Accessor defaults resolved from the environment."""

    decode_mode: str = _DEFAULT_DECODE_MODE
    abort_on_misuse: bool = False


def load_settings() -> Settings:
    """Read accessor settings from ``FIELDSCHEMA_*`` environment variables."""

    decode_mode = env_str(DECODE_MODE_ENV, _DEFAULT_DECODE_MODE).lower()
    if decode_mode not in _DECODE_MODES:
        raise ConfigurationError.invalid_value(DECODE_MODE_ENV, decode_mode, f"Expected one of {list(_DECODE_MODES)}")
    abort_on_misuse = env_bool(ABORT_ON_MISUSE_ENV, False)
    return Settings(decode_mode=decode_mode, abort_on_misuse=bool(abort_on_misuse))


__all__ = [
    "ABORT_ON_MISUSE_ENV",
    "DECODE_MODE_ENV",
    "Settings",
    "env_bool",
    "env_str",
    "load_settings",
]
