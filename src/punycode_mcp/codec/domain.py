"""Punycode conversion of whole domain names and email addresses.

Labels are separated by any of the IDNA2003 full stops (RFC 3490, section
3.1) and always rejoined with an ASCII full stop. For email addresses only
the part after the first ``@`` is converted.
"""

import re
from typing import Callable

from .label import to_ascii, to_unicode

LABEL_SEPARATORS = ("\u002e", "\u3002", "\uff0e", "\uff61")

_SEPARATOR_RE = re.compile("[" + "".join(LABEL_SEPARATORS) + "]")


def split_labels(domain: str) -> list[str]:
    """Split a domain on all recognized separators, keeping empty labels."""
    return _SEPARATOR_RE.split(domain)


def _map_domain(domain: str, convert: Callable[[str], str]) -> str:
    local, at, host = domain.partition("@")
    if not at:
        local, host = "", domain
    labels = split_labels(host)
    return local + at + ".".join(convert(label) for label in labels)


def encode(domain: str) -> str:
    """Convert a Unicode domain name or email address to its ASCII form.

    Args:
        domain (str): Domain name, or email address, possibly with Unicode labels.

    Returns:
        str: The domain with every non-ASCII label replaced by its ``xn--`` form.
    """
    return _map_domain(domain, to_ascii)


def decode(domain: str) -> str:
    """Convert an ASCII domain name or email address to its Unicode form.

    Args:
        domain (str): Domain name, or email address, possibly with ``xn--`` labels.

    Returns:
        str: The domain with every ACE label decoded.
    """
    return _map_domain(domain, to_unicode)
