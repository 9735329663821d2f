"""Punycode conversion of single domain labels."""

from .bootstring import bootstring_decode, bootstring_encode
from .ucs2 import from_scalars, to_codepoints

ACE_PREFIX = "xn--"


def is_ace_label(label: str) -> bool:
    """Return True if ``label`` carries the ACE prefix (case-insensitive)."""
    return label[: len(ACE_PREFIX)].lower() == ACE_PREFIX


def encode_label(label: str) -> str:
    """Encode one label to Punycode without adding the ACE prefix.

    Surrogate pairs in ``label`` are joined before encoding.
    """
    return bootstring_encode(to_codepoints(label))


def decode_label(label: str) -> str:
    """Decode a Punycode label (without ACE prefix) to a Unicode string."""
    return from_scalars(bootstring_decode(label))


def to_ascii(label: str) -> str:
    """Convert a label to its ASCII-compatible form.

    Labels made of ASCII characters only are returned unchanged, all others
    are Punycode encoded and prefixed with ``xn--``.

    Args:
        label (str): A single domain label.

    Returns:
        str: ASCII-compatible label.
    """
    if label.isascii():
        return label
    return ACE_PREFIX + encode_label(label)


def to_unicode(label: str) -> str:
    """Convert an ASCII-compatible label back to Unicode.

    Labels without the ACE prefix are returned unchanged. The Punycode part
    is lowercased before decoding.

    Args:
        label (str): A single domain label.

    Returns:
        str: Unicode label.

    Raises:
        InvalidInputError: If the Punycode part is malformed.
        CodecOverflowError: If the Punycode part encodes out of range values.
    """
    if not is_ace_label(label):
        return label
    return decode_label(label[len(ACE_PREFIX):].lower())
