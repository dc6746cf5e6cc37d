"""Coercion backends used by :class:`fieldschema.field_data.FieldData`."""

from ..exceptions import ConfigurationError
from .base import DecodeError, Decoder
from .strict import StrictDecoder
from .weak import WeakDecoder

_DECODERS = {
    WeakDecoder.name: WeakDecoder,
    StrictDecoder.name: StrictDecoder,
}


def get_decoder(mode: str) -> Decoder:
    """Return a decoder for ``"weak"`` or ``"strict"`` mode."""
    try:
        decoder_cls = _DECODERS[mode.strip().lower()]
    except (AttributeError, KeyError) as exc:
        raise ConfigurationError.invalid_value("decode mode", mode, f"Expected one of {sorted(_DECODERS)}") from exc
    return decoder_cls()


__all__ = [
    "DecodeError",
    "Decoder",
    "StrictDecoder",
    "WeakDecoder",
    "get_decoder",
]
