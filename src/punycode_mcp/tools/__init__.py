"""Tools related submodule to keep all things tool related in one place."""

from .converter import (
    codepoint_converter_impl,
    punycode_converter_impl,
    punycode_decoder_impl,
    punycode_inspect_impl,
    punycode_label_decoder_impl,
    punycode_label_encoder_impl,
)

__all__ = [
    "codepoint_converter_impl",
    "punycode_converter_impl",
    "punycode_decoder_impl",
    "punycode_inspect_impl",
    "punycode_label_decoder_impl",
    "punycode_label_encoder_impl",
]
