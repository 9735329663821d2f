"""Punycode conversion tool implementations.

Each function wraps one codec operation and reports the outcome as a
``ToolResult``. Codec errors are converted to messages and never raised.
"""

from fastmcp.utilities.logging import get_logger

from ..codec import (
    decode,
    decode_label,
    encode,
    encode_label,
    is_ace_label,
    split_labels,
    to_ascii,
    to_codepoints,
    to_unicode,
)
from ..exceptions import PunycodeError, handle_codec_error
from ..typedefs import LabelReport, ToolResult

logger = get_logger(__name__)


async def punycode_converter_impl(domain: str) -> ToolResult:
    """Perform Unicode IDN domain name conversion into punycode ASCII format.

    Args:
        domain (str): The domain name to convert to punycode.

    Returns:
        ToolResult: Punycode domain name or error details.
    """
    try:
        punycode = encode(domain.strip())
    except PunycodeError as e:
        logger.warning("Punycode encoding of %r failed: %s", domain, e)
        return ToolResult(success=False, error=handle_codec_error(e))
    logger.debug("Encoded %r as %r", domain, punycode)
    return ToolResult(success=True, output={"domain": domain, "punycode": punycode})


async def punycode_decoder_impl(domain: str) -> ToolResult:
    """Convert a punycode (ACE) domain name back into its Unicode form.

    Args:
        domain (str): The ASCII domain name to decode.

    Returns:
        ToolResult: Unicode domain name or error details.
    """
    try:
        unicode_domain = decode(domain.strip())
    except PunycodeError as e:
        logger.warning("Punycode decoding of %r failed: %s", domain, e)
        return ToolResult(success=False, error=handle_codec_error(e))
    logger.debug("Decoded %r as %r", domain, unicode_domain)
    return ToolResult(success=True, output={"punycode": domain, "domain": unicode_domain})


async def punycode_label_encoder_impl(label: str) -> ToolResult:
    """Encode a single label with Bootstring, without the ``xn--`` prefix."""
    try:
        encoded = encode_label(label)
    except PunycodeError as e:
        logger.warning("Label encoding of %r failed: %s", label, e)
        return ToolResult(success=False, error=handle_codec_error(e))
    return ToolResult(success=True, output={"label": label, "encoded": encoded})


async def punycode_label_decoder_impl(label: str) -> ToolResult:
    """Decode a single Bootstring label given without the ``xn--`` prefix."""
    try:
        decoded = decode_label(label)
    except PunycodeError as e:
        logger.warning("Label decoding of %r failed: %s", label, e)
        return ToolResult(success=False, error=handle_codec_error(e))
    return ToolResult(success=True, output={"encoded": label, "label": decoded})


async def punycode_inspect_impl(domain: str) -> ToolResult:
    """Break a domain name into labels and show both forms of each label.

    Accepts either the Unicode or the ASCII form. Email addresses are
    inspected on their domain part only.

    Args:
        domain (str): Domain name to inspect.

    Returns:
        ToolResult: List of ``LabelReport`` entries, one per label.
    """
    host, at, rest = domain.strip().partition("@")
    if at:
        host = rest
    reports: list[LabelReport] = []
    try:
        for label in split_labels(host):
            unicode_label = to_unicode(label)
            ascii_label = to_ascii(unicode_label)
            reports.append(
                LabelReport(
                    unicode=unicode_label,
                    ascii=ascii_label,
                    is_ace=is_ace_label(ascii_label),
                    codepoints=to_codepoints(unicode_label),
                )
            )
    except PunycodeError as e:
        logger.warning("Inspection of %r failed: %s", domain, e)
        return ToolResult(success=False, error=handle_codec_error(e))
    return ToolResult(
        success=True,
        output=reports,
        details={"label_count": len(reports)},
    )


async def codepoint_converter_impl(text: str) -> ToolResult:
    """Return the Unicode codepoints of ``text``, joining surrogate pairs."""
    codepoints = to_codepoints(text)
    return ToolResult(
        success=True,
        output={"text": text, "codepoints": codepoints},
        details={"hex": [f"U+{value:04X}" for value in codepoints]},
    )
