"""Punycode (RFC 3492) codec and MCP conversion server."""

from .codec import (
    bootstring_decode,
    bootstring_encode,
    decode,
    decode_label,
    encode,
    encode_label,
    from_codepoints,
    is_ace_label,
    split_labels,
    to_ascii,
    to_codepoints,
    to_unicode,
)
from .exceptions import CodecOverflowError, InvalidInputError, PunycodeError

__version__ = "0.1.0"

__all__ = [
    "CodecOverflowError",
    "InvalidInputError",
    "PunycodeError",
    "bootstring_decode",
    "bootstring_encode",
    "decode",
    "decode_label",
    "encode",
    "encode_label",
    "from_codepoints",
    "is_ace_label",
    "split_labels",
    "to_ascii",
    "to_codepoints",
    "to_unicode",
]
