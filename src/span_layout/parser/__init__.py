"""Configuration model, shareable-token codec, and persisted record."""

from span_layout.parser.codec import decode_config, decode_fields, encode_config
from span_layout.parser.model import DEFAULT_CONFIG, Configuration, LayoutResult

__all__ = [
    "Configuration",
    "DEFAULT_CONFIG",
    "LayoutResult",
    "decode_config",
    "decode_fields",
    "encode_config",
]
