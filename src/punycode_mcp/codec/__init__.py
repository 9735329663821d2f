"""Punycode (RFC 3492) codec for internationalized domain names."""

from .bootstring import bootstring_decode, bootstring_encode
from .domain import LABEL_SEPARATORS, decode, encode, split_labels
from .label import (
    ACE_PREFIX,
    decode_label,
    encode_label,
    is_ace_label,
    to_ascii,
    to_unicode,
)
from .ucs2 import from_codepoints, from_scalars, to_codepoints

__all__ = [
    "ACE_PREFIX",
    "LABEL_SEPARATORS",
    "bootstring_decode",
    "bootstring_encode",
    "decode",
    "decode_label",
    "encode",
    "encode_label",
    "from_codepoints",
    "from_scalars",
    "is_ace_label",
    "split_labels",
    "to_ascii",
    "to_codepoints",
    "to_unicode",
]
